"""Address Validation API."""
from gmp_tools.tools.endpoint import JSON_BODY_HEADERS, Endpoint, body_param

ADDRESS_VALIDATION_BASE_URL = "https://addressvalidation.googleapis.com/v1"

VALIDATE_ADDRESS = Endpoint(
    name="validate_address",
    description="Validate an address using the Google Maps Address Validation API.",
    method="POST",
    url=f"{ADDRESS_VALIDATION_BASE_URL}:validateAddress",
    params=(
        body_param(
            "regionCode", "string", 'The region code of the address (e.g., "US").',
            required=True, wire_name="address.regionCode",
        ),
        body_param(
            "locality", "string", 'The locality of the address (e.g., "Mountain View").',
            required=True, wire_name="address.locality",
        ),
        body_param(
            "addressLines", {"type": "array", "items": {"type": "string"}},
            'The address lines of the address (e.g., ["1600 Amphitheatre Pkwy"]).',
            required=True, wire_name="address.addressLines",
        ),
    ),
    headers=JSON_BODY_HEADERS,
    error_context="validating the address",
    keywords=("validate", "validation", "address", "postal", "verify"),
)

PROVIDE_VALIDATION_FEEDBACK = Endpoint(
    name="provide_validation_feedback",
    description="Provide validation feedback to the Google Address Validation API.",
    method="POST",
    url=f"{ADDRESS_VALIDATION_BASE_URL}:provideValidationFeedback",
    params=(
        body_param(
            "conclusion", "string",
            "The conclusion of the validation "
            "(VALIDATED_VERSION_USED, USER_VERSION_USED, UNVALIDATED_VERSION_USED or UNUSED).",
            required=True,
        ),
        body_param("responseId", "string", "The response ID from the address validation request.", required=True),
    ),
    headers=JSON_BODY_HEADERS,
    error_context="providing validation feedback",
    keywords=("validation", "feedback", "address"),
)

ENDPOINTS = (VALIDATE_ADDRESS, PROVIDE_VALIDATION_FEEDBACK)
