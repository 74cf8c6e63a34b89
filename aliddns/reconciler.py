"""Synchronize the resolved public address into the DNS record."""

from typing import Callable

from rich.console import Console

from aliddns.config import DDNSConfig, EndpointsConfig, get_fqdn
from aliddns.errors import DDNSError
from aliddns.models import AddressFamily, ReconcileOutcome, ReconcileResult
from aliddns.providers.dns.base import DNSProvider
from aliddns.resolver import resolve_address

Resolver = Callable[[AddressFamily, EndpointsConfig, float], str]


class Reconciler:
    """Runs resolve -> lookup -> decide -> mutate for each enabled family.

    Nothing is kept between passes: every pass starts from the live
    provider state.
    """

    def __init__(
        self,
        config: DDNSConfig,
        provider: DNSProvider,
        resolve: Resolver | None = None,
        console: Console | None = None,
    ):
        self.config = config
        self.provider = provider
        self.resolve = resolve or resolve_address
        self.console = console or Console()
        self.fqdn = get_fqdn(config)

    def reconcile(self, family: AddressFamily) -> ReconcileResult:
        """Bring the record of one address family up to date.

        Never raises for provider or resolution failures; they come back
        as a FAILED result.
        """
        record_type = family.record_type

        try:
            address = self.resolve(family, self.config.endpoints, self.config.timeout)
            record = self.provider.lookup_record(self.config.domain, self.config.rr, record_type)

            if record is None:
                self.provider.upsert_record(
                    self.config.domain, self.config.rr, address, record_type
                )
                return self._result(family, ReconcileOutcome.ADDED, new_value=address)

            if record.value == address:
                return self._result(
                    family, ReconcileOutcome.UNCHANGED, old_value=record.value, new_value=address
                )

            self.provider.upsert_record(
                self.config.domain,
                self.config.rr,
                address,
                record_type,
                record_id=record.record_id,
            )
            return self._result(
                family, ReconcileOutcome.UPDATED, old_value=record.value, new_value=address
            )
        except DDNSError as e:
            return self._result(family, ReconcileOutcome.FAILED, error=str(e))

    def run_pass(self) -> list[ReconcileResult]:
        """Reconcile every enabled family in turn, printing one line each."""
        results = []
        for family in self.config.mode.families:
            result = self.reconcile(family)
            self.console.print(result.render(), emoji=False)
            results.append(result)
        return results

    def _result(self, family: AddressFamily, outcome: ReconcileOutcome, **kwargs) -> ReconcileResult:
        return ReconcileResult(family=family, fqdn=self.fqdn, outcome=outcome, **kwargs)
