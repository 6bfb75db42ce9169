################################################################################
#################### INTERLOCK IS LICENSED UNDER GNU AGPLv3 ####################
################## ORIGINAL PROJECT CREATED BY DYLAN BLANQUÉ ###################
########################## AND BR CONSULTING S.R.L. ############################
################################################################################
# Module: ad_normalizer.ldap.groups
# Contains:
# - Membership field variants (Absent | Single | Many)
# - Group Common Name resolution from memberOf values
################################################################################

# ---------------------------------- IMPORTS --------------------------------- #
from dataclasses import dataclass
from typing import Any, Iterable, Union
from ad_normalizer.config.runtime import RuntimeSettings
from ad_normalizer.constants.attrs import LDAP_DN_SEPARATOR, LDAP_CN_PREFIX
from ad_normalizer.exceptions.ldap import InvalidEntry
from ad_normalizer.ldap.entry import DirectoryEntry, get_entry_object
import logging

################################################################################
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Absent:
	"""Membership field not present on the entry."""


@dataclass(frozen=True)
class Single:
	"""Membership field returned as one Distinguished Name string."""

	value: str


@dataclass(frozen=True)
class Many:
	"""Membership field returned as a sequence of Distinguished Names."""

	values: tuple[str, ...]


class Membership:
	"""Builds the membership variant for a raw memberOf value."""

	@staticmethod
	def from_value(value: Any) -> Union[Absent, Single, Many]:
		if value is None:
			return Absent()
		if isinstance(value, str):
			return Single(value)
		if isinstance(value, (list, tuple)):
			if not all(isinstance(v, str) for v in value):
				raise InvalidEntry(
					data={"detail": "Membership values must be strings."}
				)
			return Many(tuple(value))
		raise InvalidEntry(
			data={
				"detail": "Unsupported membership value type "
				f"({type(value).__name__})."
			}
		)


def extract_common_names(distinguished_name: str) -> list[str]:
	"""Returns every CN= component of a Distinguished Name, prefix stripped.

	Components are split on every comma, escaped commas (\\,) are not
	honored: CN=Doe\\, John yields "Doe\\".
	"""
	r = []
	for component in distinguished_name.split(LDAP_DN_SEPARATOR):
		component = component.strip()
		if component.startswith(LDAP_CN_PREFIX):
			r.append(component[len(LDAP_CN_PREFIX) :])
	return r


def _membership_strings(
	membership: Union[Absent, Single, Many],
) -> Iterable[str]:
	if isinstance(membership, Absent):
		return ()
	elif isinstance(membership, Single):
		return (membership.value,)
	elif isinstance(membership, Many):
		return membership.values
	raise TypeError(f"Unhandled membership variant ({membership!r}).")


def resolve_groups(entry: DirectoryEntry) -> list[str]:
	"""Resolves the group Common Names an entry is a member of.

	Order follows the memberOf values, string by string, left to right.
	No deduplication is done.

	Args:
		entry (DirectoryEntry): Entry returned by the directory client.

	Raises:
		InvalidEntry: When the entry or its object mapping is missing, or
			the membership field has an unsupported shape.

	Returns:
		list[str]: Group names, empty when the membership field is absent.
	"""
	entry_object = get_entry_object(entry)
	membership = Membership.from_value(
		entry_object.get(RuntimeSettings.LDAP_GROUP_FIELD)
	)

	groups = []
	for distinguished_name in _membership_strings(membership):
		groups.extend(extract_common_names(distinguished_name))
	logger.debug("Resolved %d group(s) from %r", len(groups), membership)
	return groups
