"""Version information for app-deploy package"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__author__ = "app-deploy developers"
__email__ = ""
__license__ = "MIT"
__copyright__ = "Copyright 2025 app-deploy developers"
