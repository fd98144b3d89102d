"""
Shared constants used by the built-in rules and the submission flow.

Centralizes the digit counts and thresholds the rules check against.
"""

# National ID (CPF) length
NATIONAL_ID_DIGITS = 11

# Phone number validation bounds
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 11

# Postal code (CEP) length
POSTAL_CODE_DIGITS = 8

# Birth date
MINIMUM_AGE = 18

# Fallback storage key prefix when a form has no id
DEFAULT_FORM_ID = "form-data"

SUCCESS_MESSAGE = "Success! Form submitted successfully. The data was saved locally."
