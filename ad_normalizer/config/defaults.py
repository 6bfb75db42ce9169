################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.config.defaults
from ad_normalizer.constants.attrs import *

### NORMALIZER SETTINGS
# ! You also have to add the settings to the following files:
# ad_normalizer.config.runtime
# ad_normalizer.config.defaults	<------------ You're Here

# Entry object field holding the user's group memberships.
LDAP_GROUP_FIELD = LDAP_ATTR_USER_GROUPS

# Binary attributes, looked up by type in the entry attributes sequence.
LDAP_GUID_FIELD = LDAP_ATTR_GUID
LDAP_SID_FIELD = LDAP_ATTR_SECURITY_ID

# Normalized user fields mapped to the LDAP attributes that represent them.
LDAP_USER_FIELD_MAP = {
	LOCAL_ATTR_EMAIL: LDAP_ATTR_EMAIL,
	LOCAL_ATTR_PHONE: LDAP_ATTR_PHONE,
	LOCAL_ATTR_NAME: LDAP_ATTR_NAME,
}

# Name of the bind error raised by the directory client on a failed bind.
BIND_ERROR_INVALID_CREDENTIALS = "InvalidCredentialsError"

# AD sub-error code (data 775) returned for locked out accounts.
BIND_ERROR_LOCKOUT_CODE = "775"

BIND_ERROR_MSG_LOCKED_OUT = "Account is locked out"
BIND_ERROR_MSG_INVALID_CREDENTIALS = "Invalid username or password"
BIND_ERROR_MSG_UNKNOWN = "Unknown Auth Error"

# Django setting holding overrides for any of the above.
SETTINGS_OVERRIDE_KEY = "AD_NORMALIZER"
