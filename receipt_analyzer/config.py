#!/usr/bin/env python3
"""
Configuration for Receipt Analyzer
Edit these values to point the analyzer at a different receipt source
"""

# Receipt Source
# The remote endpoint returns a JSON array of receipt line items.
# Can be overridden by:
# 1. CLI flag --url (highest priority)
# 2. Environment variable: RECEIPT_ANALYZER_URL
# 3. YAML settings file (--config), key: url
RECEIPT_URL = 'https://interview-task-api.mca.dev/qr-scanner-codes/alpha-qr-gFpwhsQ8fkY1'
RECEIPT_URL_ENV = 'RECEIPT_ANALYZER_URL'

# HTTP request timeout in seconds (no retries are attempted)
REQUEST_TIMEOUT = 10

# Product Settings
NAME_MAX_LENGTH = 10                   # Names longer than this are cut, silently
DEFAULT_TEXT = 'N/A'                   # Fallback for missing name/description/weight
WEIGHT_UNIT = 'g'                      # Suffix appended to weight values
PRICE_EXPONENT_LIMIT = 999999999      # Prices beyond 1E+/-this are rejected

# Report Settings
REPORT = {
    'domestic_header': '. Domestic',
    'imported_header': '. Imported',
    'item_prefix': '... ',
    'currency': '$',
    'decimal_separator': ',',          # Replaces '.' in decimal text
    # An empty product list prints the parse failure message unless enabled
    'allow_empty': False,
}

# Logging Settings
LOGGING = {
    'level': 'WARNING',                # DEBUG, INFO, WARNING, ERROR
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'log_file': 'receipt_analyzer.log',
}
