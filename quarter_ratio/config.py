"""Configuration settings for the quarter distribution"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Distribution defaults, parsed by DistributedRatioConfig.from_settings
NUMBER_OF_QTRS = os.getenv('QR_NUMBER_OF_QTRS', '4')
QTR_DEFAULTS = os.getenv('QR_QTR_DEFAULTS', '')
QTR_VAL_KEY = os.getenv('QR_QTR_VAL_KEY', 'value')
REMAINDER_STRATEGY = os.getenv('QR_REMAINDER_STRATEGY', 'floor')

# Example app factory settings
EXAMPLE_NUMBER_OF_QTRS = 6
EXAMPLE_QTR_DEFAULTS = (.10, .20, .20, .20, .20, .10)

# File paths
DATA_DIR = os.getenv('QR_DATA_DIR', './data')
RUNS_DIR = os.path.join(DATA_DIR, 'runs')
QUARTERS_FILE = os.path.join(DATA_DIR, 'quarters.json')
OUTPUT_FILE = os.path.join(DATA_DIR, 'distribution_results.json')

# Logging
LOG_LEVEL = os.getenv('QR_LOG_LEVEL', 'WARNING')
