import os
import sys

from dotenv import load_dotenv

from enums.currency import Currency
from enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test runs to set RUNTIME_ENVIRONMENT=test before import
load_dotenv(".env", override=False)

# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(os.environ.get("RUNTIME_ENVIRONMENT", "dev").lower())
except ValueError as e:
    valid_values = [env.value for env in RuntimeEnvironment]
    print(f"\n ERROR: Invalid RUNTIME_ENVIRONMENT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('RUNTIME_ENVIRONMENT', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: RUNTIME_ENVIRONMENT={valid_values[0]}\n", file=sys.stderr)
    sys.exit(1)

# Database holding the admin-managed configuration tables
# (weight rate bands, vendor rules, vendors, shipping matrix, discount thresholds)
DB_URL = os.environ.get("DB_URL", "sqlite+aiosqlite:///data/storefront.db")

LANGUAGE = os.environ.get("STORE_LANGUAGE", "en")  # Default to English

# Parse CURRENCY with error handling
try:
    CURRENCY = Currency(os.environ.get("CURRENCY", Currency.NGN.value).upper())
except ValueError as e:
    valid_currencies = [c.value for c in Currency]
    print(f"\n ERROR: Invalid CURRENCY configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_currencies)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('CURRENCY', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: CURRENCY={valid_currencies[0]}\n", file=sys.stderr)
    sys.exit(1)

# Parse COMBO_MAX_PAIR_SAMPLE_SIZE with error handling
# Caps the number of products considered for pairwise bundles (O(n^2))
try:
    COMBO_MAX_PAIR_SAMPLE_SIZE = int(os.environ.get("COMBO_MAX_PAIR_SAMPLE_SIZE", "50"))
    if COMBO_MAX_PAIR_SAMPLE_SIZE <= 0:
        raise ValueError(f"COMBO_MAX_PAIR_SAMPLE_SIZE must be positive (got: {COMBO_MAX_PAIR_SAMPLE_SIZE})")
except ValueError as e:
    print(f"\n ERROR: Invalid COMBO_MAX_PAIR_SAMPLE_SIZE configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Positive integer (e.g., 20, 50, 100)", file=sys.stderr)
    print(f"Current value: {os.environ.get('COMBO_MAX_PAIR_SAMPLE_SIZE', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask customer data in logs
LOG_DIR = os.environ.get("LOG_DIR", "logs")

# Log Retention: Environment-specific defaults
# Dev: keep 30 days for debugging
# Prod: Use 5 days default to save disk space
if RUNTIME_ENVIRONMENT == RuntimeEnvironment.DEV:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "30"))
else:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))
