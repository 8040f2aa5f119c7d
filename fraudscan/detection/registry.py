"""Session state shared by the fraud rules.

Rules only read from :class:`PatternRegistry`. Writes produced while a
document is evaluated are staged on a :class:`RegistryUpdate` and applied by
:meth:`PatternRegistry.commit` once every rule for that document finished.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from fraudscan.config.settings import Settings
from fraudscan.detection.fields import normalize_identifier


def keyword_matcher(*keywords: str) -> re.Pattern[str]:
    """Match text containing every keyword, in any order, case-insensitively."""
    lookaheads = "".join(f"(?=.*{re.escape(k)})" for k in keywords)
    return re.compile(f"^{lookaheads}", re.IGNORECASE | re.DOTALL)


@dataclass
class RegistryUpdate:
    """Writes staged by stateful rules for a single document."""

    fingerprints: dict[str, str] = field(default_factory=dict)
    vendors: list[str] = field(default_factory=list)
    account_owners: dict[str, str] = field(default_factory=dict)

    def record_fingerprint(self, digest: str, text: str) -> None:
        self.fingerprints.setdefault(digest, text)

    def record_vendor(self, vendor: str) -> None:
        self.vendors.append(vendor)

    def record_account_owner(self, account: str, vendor: str) -> None:
        self.account_owners.setdefault(account, vendor)


class PatternRegistry:
    """Fraud signatures plus the running memory of the current session."""

    DEFAULT_KNOWN_BAD: ClassVar[tuple[str, ...]] = (
        "known_shell_company1",
        "known_shell_company2",
    )

    PHISHING_RE: ClassVar[re.Pattern[str]] = keyword_matcher("invoice", "urgent", "payment")
    KICKBACK_RE: ClassVar[re.Pattern[str]] = keyword_matcher("referral", "commission")
    ADVANCE_PAYMENT_RE: ClassVar[re.Pattern[str]] = keyword_matcher(
        "advance", "payment", "required"
    )

    def __init__(
        self,
        known_bad_identifiers: Iterable[str] | None = None,
        known_vendors: Iterable[str] = (),
    ) -> None:
        if known_bad_identifiers is None:
            known_bad_identifiers = self.DEFAULT_KNOWN_BAD
        self._known_bad = frozenset(
            normalize_identifier(i) for i in known_bad_identifiers if normalize_identifier(i)
        )
        self._seed_vendors = tuple(
            normalize_identifier(v) for v in known_vendors if normalize_identifier(v)
        )
        self._fingerprints: dict[str, str] = {}
        self._vendor_history: dict[str, int] = {}
        self._account_owners: dict[str, str] = {}
        self.reset()

    @classmethod
    def from_settings(cls, settings: Settings) -> PatternRegistry:
        return cls(
            known_bad_identifiers=settings.known_shell_companies,
            known_vendors=settings.known_vendors,
        )

    def reset(self) -> None:
        """Forget every document seen this session."""
        self._fingerprints.clear()
        self._account_owners.clear()
        self._vendor_history = {vendor: 0 for vendor in self._seed_vendors}

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def known_bad_identifiers(self) -> frozenset[str]:
        return self._known_bad

    def has_fingerprint(self, digest: str) -> bool:
        return digest in self._fingerprints

    def has_vendor_history(self) -> bool:
        return bool(self._vendor_history)

    def knows_vendor(self, vendor: str) -> bool:
        return vendor in self._vendor_history

    def account_owner(self, account: str) -> str | None:
        return self._account_owners.get(account)

    def find_known_bad(self, text: str) -> str | None:
        """Return the first known-bad identifier mentioned in *text*."""
        haystack = f"_{normalize_identifier(text)}_"
        for identifier in sorted(self._known_bad):
            if f"_{identifier}_" in haystack:
                return identifier
        return None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def commit(self, update: RegistryUpdate) -> None:
        for digest, text in update.fingerprints.items():
            self._fingerprints.setdefault(digest, text)
        for vendor in update.vendors:
            self._vendor_history[vendor] = self._vendor_history.get(vendor, 0) + 1
        for account, vendor in update.account_owners.items():
            self._account_owners.setdefault(account, vendor)
