"""
Adversarial tests for race condition attack prevention.

Verifies that concurrent registrations of the same phone number are decided
by the database, so an attacker replaying one valid code many times at once
gets exactly one account:
- No duplicate accounts for one phone number
- Every losing request sees AccountAlreadyExists, never a 500
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from unittest.mock import Mock

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.tokens.jwt_issuer import JwtTokenIssuer
from src.domain.exceptions import AccountAlreadyExists
from src.domain.models import UserAccount
from src.domain.registration import RegistrationService

pytestmark = pytest.mark.adversarial

PHONE = "+19998887777"


def _count_accounts(pool: ConnectionPool, phone: str) -> int:
    with pool.connection() as conn, conn.cursor() as cursor:
        cursor.execute("SELECT COUNT(*) FROM users WHERE phone_number = %s", (phone,))
        return cursor.fetchone()[0]


class TestRaceConditionAttacks:
    """
    Adversarial tests simulating race condition attacks.

    These tests simulate an attacker rapidly attempting concurrent
    registrations to exploit potential race conditions in the system.
    """

    @pytest.mark.parametrize("num_attackers", [5, 20])
    def test_concurrent_account_inserts_exactly_one_succeeds(
        self, pool: ConnectionPool, num_attackers: int
    ) -> None:
        """
        Attack scenario: many inserts for the same phone number at once.

        Expected defense: the UNIQUE constraint admits exactly one row.
        """
        results: list[bool] = []
        results_lock = threading.Lock()

        def attack(attacker_id: int) -> None:
            repo = PostgresAccountRepository(pool)
            try:
                repo.create_account(
                    UserAccount(id=f"attacker-{attacker_id}", phone_number=PHONE, fcm_token="")
                )
                outcome = True
            except AccountAlreadyExists:
                outcome = False
            with results_lock:
                results.append(outcome)

        with ThreadPoolExecutor(max_workers=num_attackers) as executor:
            futures = [executor.submit(attack, i) for i in range(num_attackers)]
            for f in futures:
                f.result()

        assert results.count(True) == 1, (
            f"Race condition vulnerability: {results.count(True)} registrations succeeded "
            f"(expected exactly 1)"
        )
        assert results.count(False) == num_attackers - 1
        assert _count_accounts(pool, PHONE) == 1

    def test_replayed_code_registers_once(self, pool: ConnectionPool) -> None:
        """
        Attack scenario: one valid code submitted concurrently through the
        full registration service.

        Expected defense: one request gets tokens, the rest are told the
        account exists.
        """
        cache = Mock()
        cache.get.return_value = "4521"
        service = RegistrationService(
            cache=cache,
            accounts=PostgresAccountRepository(pool),
            tokens=JwtTokenIssuer(
                "adversarial-signing-key-with-32-bytes!", access_ttl=timedelta(minutes=5)
            ),
            sms_sender=Mock(),
        )
        num_attackers = 10
        successes: list[str] = []
        conflicts: list[AccountAlreadyExists] = []
        results_lock = threading.Lock()

        def attack() -> None:
            try:
                result = service.register(PHONE, "4521", "")
            except AccountAlreadyExists as exc:
                with results_lock:
                    conflicts.append(exc)
            else:
                with results_lock:
                    successes.append(result.id)

        with ThreadPoolExecutor(max_workers=num_attackers) as executor:
            futures = [executor.submit(attack) for _ in range(num_attackers)]
            for f in futures:
                f.result()

        assert len(successes) == 1
        assert len(conflicts) == num_attackers - 1

        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT id FROM users WHERE phone_number = %s", (PHONE,))
            assert cursor.fetchone()[0] == successes[0]
