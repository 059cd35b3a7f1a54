"""CLI utility functions"""

from .output import (
    format_deploy_result,
    format_deploy_error,
    format_target_list,
    print_status,
)

__all__ = [
    'format_deploy_result',
    'format_deploy_error',
    'format_target_list',
    'print_status',
]
