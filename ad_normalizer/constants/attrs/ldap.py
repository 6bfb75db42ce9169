################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.constants.attrs.ldap
# Contains LDAP Attribute related constants.
################################################################################

LDAP_DATE_FORMAT = "%Y%m%d%H%M%S.0Z"
LDAP_DN_SEPARATOR = ","
LDAP_CN_PREFIX = "CN="
LDAP_UPN_SEPARATOR = "@"
LDAP_SAM_DOMAIN_SEPARATOR = "\\"

# LDAP Attributes
LDAP_ATTR_USERNAME_SAMBA_ADDS = "sAMAccountName"
LDAP_ATTR_EMAIL = "mail"
LDAP_ATTR_PHONE = "telephoneNumber"
LDAP_ATTR_NAME = "name"
LDAP_ATTR_DN = "distinguishedName"
LDAP_ATTR_UPN = "userPrincipalName"
LDAP_ATTR_SECURITY_ID = "objectSid"
LDAP_ATTR_GUID = "objectGUID"
LDAP_ATTR_USER_GROUPS = "memberOf"

# Directory entry keys
LDAP_ENTRY_OBJECT = "object"
LDAP_ENTRY_OBJECT_NAME = "objectName"
LDAP_ENTRY_ATTRIBUTES = "attributes"
LDAP_ENTRY_ATTRIBUTE_TYPE = "type"
LDAP_ENTRY_ATTRIBUTE_BUFFERS = "buffers"
