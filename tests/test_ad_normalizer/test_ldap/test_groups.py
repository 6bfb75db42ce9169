import pytest
from ad_normalizer.exceptions.ldap import InvalidEntry
from ad_normalizer.ldap.groups import (
	Absent,
	Single,
	Many,
	Membership,
	extract_common_names,
	resolve_groups,
)

# ---------------------------------------------------------------------------- #
#                                  MEMBERSHIP                                  #
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
	"value, expected",
	(
		pytest.param(None, Absent(), id="absent"),
		pytest.param("CN=A,DC=b", Single("CN=A,DC=b"), id="single"),
		pytest.param(["CN=A", "CN=B"], Many(("CN=A", "CN=B")), id="many-list"),
		pytest.param(("CN=A",), Many(("CN=A",)), id="many-tuple"),
		pytest.param([], Many(()), id="many-empty"),
	),
)
def test_membership_from_value(value, expected):
	assert Membership.from_value(value) == expected


@pytest.mark.parametrize(
	"value",
	(
		pytest.param(42, id="int"),
		pytest.param({"CN": "A"}, id="dict"),
		pytest.param(["CN=A", 1], id="mixed-list"),
		pytest.param(b"CN=A", id="bytes"),
	),
)
def test_membership_from_value_raises(value):
	with pytest.raises(InvalidEntry):
		Membership.from_value(value)

# ---------------------------------------------------------------------------- #
#                                   EXTRACTION                                 #
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
	"distinguished_name, expected",
	(
		("CN=Group1,CN=Group2,DC=domain,DC=com", ["Group1", "Group2"]),
		("CN=Group1, OU=Test, CN=Group2", ["Group1", "Group2"]),
		("OU=Test,DC=domain,DC=com", []),
		("", []),
		("cn=lowercase,DC=com", []),
		("CN=Doe\\, John,DC=com", ["Doe\\"]),  # Escaped commas are split
	),
)
def test_extract_common_names(distinguished_name, expected):
	assert extract_common_names(distinguished_name) == expected

# ---------------------------------------------------------------------------- #
#                                RESOLVE GROUPS                                #
# ---------------------------------------------------------------------------- #

def test_resolve_groups_single_string(f_entry_copy):
	entry = f_entry_copy(memberOf="CN=Group1,CN=Group2,DC=domain,DC=com")
	assert resolve_groups(entry) == ["Group1", "Group2"]


def test_resolve_groups_multiple_ous(f_entry):
	assert resolve_groups(f_entry) == ["Group1", "Group2"]


def test_resolve_groups_keeps_order_and_duplicates(f_entry_copy):
	entry = f_entry_copy(memberOf=[
		"CN=B,CN=A,DC=domain,DC=com",
		"CN=A,OU=Test,DC=domain,DC=com",
	])
	assert resolve_groups(entry) == ["B", "A", "A"]


def test_resolve_groups_absent(f_entry_copy):
	entry = f_entry_copy(memberOf=None)
	assert resolve_groups(entry) == []


def test_resolve_groups_missing_key(f_entry):
	del f_entry["object"]["memberOf"]
	assert resolve_groups(f_entry) == []


@pytest.mark.parametrize(
	"entry",
	(
		pytest.param(None, id="none"),
		pytest.param({}, id="no-object"),
		pytest.param({"object": None}, id="object-none"),
		pytest.param("CN=Group1", id="str"),
	),
)
def test_resolve_groups_invalid_entry_raises(entry):
	with pytest.raises(InvalidEntry):
		resolve_groups(entry)


def test_resolve_groups_custom_field(settings, f_entry_copy):
	from ad_normalizer.config.runtime import RuntimeSettings

	settings.AD_NORMALIZER = {"LDAP_GROUP_FIELD": "groupMembership"}
	RuntimeSettings.resync()
	entry = f_entry_copy(groupMembership="CN=Other,DC=domain,DC=com")
	assert resolve_groups(entry) == ["Other"]
