"""
Static committee catalog.

The catalog is reference data rather than configuration: it is defined
here, versioned with the code, and loaded once when the module is
imported.  ``CommitteeCatalog`` exposes read-only lookups; there is no
way to add or remove committees at runtime.
"""

from typing import Dict, Iterable, Optional, Tuple

from ..schemas.committee import Committee, CommitteeCategory


COMMITTEES: Tuple[Committee, ...] = (
    Committee(id="lok-sabha", name="Lok Sabha",
              description="Lower House of Indian Parliament", category=CommitteeCategory.DOMESTIC),
    Committee(id="rajya-sabha", name="Rajya Sabha",
              description="Upper House of Indian Parliament", category=CommitteeCategory.DOMESTIC),
    Committee(id="niti-aayog", name="NITI Aayog",
              description="Policy Think Tank of India", category=CommitteeCategory.DOMESTIC),
    Committee(id="supreme-court", name="Supreme Court of India",
              description="Highest Judicial Authority", category=CommitteeCategory.DOMESTIC),
    Committee(id="cabinet", name="Union Cabinet",
              description="Executive Council of Ministers", category=CommitteeCategory.DOMESTIC),
    Committee(id="assembly", name="Maharashtra Legislative Assembly",
              description="State Legislative Body", category=CommitteeCategory.DOMESTIC),
    Committee(id="unsc", name="UN Security Council",
              description="Peace and Security", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="unga", name="UN General Assembly",
              description="Global Deliberative Body", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="ecosoc", name="ECOSOC",
              description="Economic and Social Council", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="unhrc", name="UN Human Rights Council",
              description="Human Rights Protection", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="who", name="World Health Organization",
              description="Global Health Governance", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="nato", name="NATO",
              description="North Atlantic Treaty Organization", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="eu-parliament", name="European Parliament",
              description="EU Legislative Body", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="g20", name="G20 Summit",
              description="Economic Cooperation", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="icc", name="International Criminal Court",
              description="Justice and Accountability", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="us-senate", name="US Senate",
              description="Upper House of US Congress", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="arab-league", name="Arab League",
              description="Regional Cooperation", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="asean", name="ASEAN",
              description="Southeast Asian Nations", category=CommitteeCategory.INTERNATIONAL),
    Committee(id="african-union", name="African Union",
              description="Continental Unity", category=CommitteeCategory.INTERNATIONAL),
)


class CommitteeCatalog:
    """Read-only lookup table over a fixed sequence of committees."""

    def __init__(self, committees: Iterable[Committee]):
        self._committees: Tuple[Committee, ...] = tuple(committees)
        self._by_id: Dict[str, Committee] = {}
        for committee in self._committees:
            if committee.id in self._by_id:
                raise ValueError(f"Duplicate committee id '{committee.id}' in catalog")
            self._by_id[committee.id] = committee

    def all(self) -> Tuple[Committee, ...]:
        return self._committees

    def get_by_id(self, committee_id: str) -> Optional[Committee]:
        """Return the committee with ``committee_id`` or ``None``.

        Unknown ids are not an error; callers display the raw id instead.
        """
        return self._by_id.get(committee_id)

    def filter_by_category(self, category: CommitteeCategory) -> Tuple[Committee, ...]:
        """Committees of ``category`` in catalog definition order."""
        return tuple(c for c in self._committees if c.category == category)

    def display_name(self, committee_id: str) -> str:
        committee = self.get_by_id(committee_id)
        return committee.name if committee else committee_id

    def __len__(self) -> int:
        return len(self._committees)

    def __contains__(self, committee_id: object) -> bool:
        return committee_id in self._by_id


committee_catalog = CommitteeCatalog(COMMITTEES)
