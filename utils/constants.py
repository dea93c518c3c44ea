"""
Constants for the point set library and its command-line harness.
"""
import logging

# Rebuild the kd-tree once its depth exceeds this multiple of ln(size)
REBALANCE_DEPTH_FACTOR = 2

# Logging setup used by main.py
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_LOG_LEVEL = logging.INFO
