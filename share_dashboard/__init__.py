"""
Social Media Share Dashboard v1.0.0

Desktop dashboard for monthly social-media usage-share statistics.
Loads a single CSV file, lets the user pick a year, and shows a treemap
of average platform shares for that year next to a line chart of one
platform's monthly share trend.
"""

APP_NAME = "Social Media Share Dashboard"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-17"
__version__ = APP_VERSION
