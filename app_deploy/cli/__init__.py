"""Command line interface for app-deploy"""
