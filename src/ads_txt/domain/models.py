"""
Domain models — immutable data structures for a parsed ads.txt file.

These are pure value objects. `AdsTxt` is the aggregate returned by the
document parsers and offers read-only queries over its variables and records.

All models are frozen dataclasses (immutable) following functional principles.
Records and variables keep the order in which they appeared in the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

SUBDOMAIN = "subdomain"
CONTACT = "contact"
INVENTORY_PARTNER_DOMAIN = "inventorypartnerdomain"
OWNER_DOMAIN = "ownerdomain"
MANAGER_DOMAIN = "managerdomain"


@unique
class AccountRelation(Enum):
    """Whether the exchange sells directly for the publisher or as a reseller."""

    DIRECT = "DIRECT"
    RESELLER = "RESELLER"


@dataclass(frozen=True, slots=True)
class DataRecord:
    """
    One authorized seller declaration.

    `cert_authority` is None when the line had three fields and holds the
    (trimmed) fourth field otherwise, e.g. a TAG-ID.
    """

    domain: str
    publisher_id: str
    account_relation: AccountRelation
    cert_authority: str | None = None


@dataclass(frozen=True, slots=True)
class Variable:
    """A `name=value` directive such as `subdomain=` or `contact=`."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class AdsTxt:
    """
    A parsed ads.txt / app-ads.txt document.

    Variable names are not unique: every `contact=` line is retained, in order.
    Both sequences are tuples, so a document is hashable like its parts.
    """

    records: tuple[DataRecord, ...] = ()
    variables: tuple[Variable, ...] = ()

    def values(self, name: str) -> list[str]:
        """Values of every variable whose name equals `name` exactly (case-sensitive)."""
        return [variable.value for variable in self.variables if variable.name == name]

    def _values_ignoring_case(self, name: str) -> list[str]:
        return [variable.value for variable in self.variables if variable.name.lower() == name]

    def sub_domains(self) -> list[str]:
        return self._values_ignoring_case(SUBDOMAIN)

    def contacts(self) -> list[str]:
        return self._values_ignoring_case(CONTACT)

    def inventory_partner_domains(self) -> list[str]:
        return self._values_ignoring_case(INVENTORY_PARTNER_DOMAIN)

    def owner_domains(self) -> list[str]:
        return self._values_ignoring_case(OWNER_DOMAIN)

    def manager_domains(self) -> list[str]:
        return self._values_ignoring_case(MANAGER_DOMAIN)

    def direct_records(self) -> list[DataRecord]:
        return [r for r in self.records if r.account_relation is AccountRelation.DIRECT]

    def reseller_records(self) -> list[DataRecord]:
        return [r for r in self.records if r.account_relation is AccountRelation.RESELLER]

    @property
    def is_empty(self) -> bool:
        return not self.records and not self.variables
