# keywords.py
# Placeholder names used in the agreement template. Each extraction function
# in placeholder_mapper owns its own keys, so merged maps never collide.

# --- header ---
IS_SAMPLE = "IsSample"
DANS_MANAGED_DOI = "DansManagedDoi"
DANS_MANAGED_ENCODED_DOI = "DansManagedEncodedDoi"
DATE_SUBMITTED = "DateSubmitted"
TITLE = "Title"

# --- footer ---
FOOTER_TEXT = "FooterText"

# --- depositor ---
DEPOSITOR_NAME = "DepositorName"
DEPOSITOR_ORGANISATION = "DepositorOrganisation"
DEPOSITOR_ADDRESS = "DepositorAddress"
DEPOSITOR_POSTAL_CODE = "DepositorPostalCode"
DEPOSITOR_CITY = "DepositorCity"
DEPOSITOR_COUNTRY = "DepositorCountry"
DEPOSITOR_TELEPHONE = "DepositorTelephone"
DEPOSITOR_EMAIL = "DepositorEmail"

# --- access rights / embargo ---
OPEN_ACCESS = "OpenAccess"
ACCESS_RIGHTS = "AccessRights"
UNDER_EMBARGO = "UnderEmbargo"
DATE_AVAILABLE = "DateAvailable"

# --- tables ---
CURRENT_DATE_AND_TIME = "CurrentDateAndTime"
METADATA_TABLE = "MetadataTable"
FILE_TABLE = "FileTable"
HAS_FILES = "HasFiles"

# row keys inside the tables
METADATA_KEY = "metadataKey"
METADATA_VALUE = "metadataValue"
FILE_KEY = "fileKey"
FILE_VALUE = "fileValue"
FILE_ACCESSIBLE_TO = "fileAccessibleTo"

# --- resources in Settings.template_resource_dir ---
METADATA_TERMS_FILE = "MetadataTerms.json"
FOOTER_TEXT_FILE = "FooterText.txt"
