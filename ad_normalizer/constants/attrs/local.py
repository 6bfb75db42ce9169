################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.constants.attrs.local
# Contains normalized (local) attribute keys.
################################################################################

LOCAL_ATTR_GROUPS = "groups"
LOCAL_ATTR_EMAIL = "mail"
LOCAL_ATTR_PHONE = "phone"
LOCAL_ATTR_NAME = "name"
LOCAL_ATTR_GUID = "guid"
LOCAL_ATTR_DN = "dn"
