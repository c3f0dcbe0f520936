"""Active Directory attribute names."""

OBJECT_CATEGORY = "objectcategory"
DISTINGUISHED_NAME = "distinguishedname"

# Always requested alongside a non-empty attribute selection.
MANDATORY_SELECTS = (OBJECT_CATEGORY, DISTINGUISHED_NAME)
