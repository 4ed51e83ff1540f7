"""
Concurrency safety for LedgerService.

Many threads submitting expenses and payments against one group must not
break conservation or antisymmetry, and must not lose updates.
"""

import random
import threading

from splitledger.models.split import EqualSplit
from splitledger.services.balance_sheet import GroupBalanceSheet


class TestConcurrency:

    def test_concurrent_writes_conserve_money(self, service):
        group = service.open_group(group_id="busy")
        users = ["A", "B", "C", "D"]
        errors = []

        def worker(seed):
            rng = random.Random(seed)
            try:
                for _ in range(50):
                    if rng.random() < 0.5:
                        service.submit_expense(group.id, "x", rng.randint(1, 10000), rng.choice(users),
                                               EqualSplit(), users)
                    else:
                        payer, payee = rng.sample(users, 2)
                        service.record_payment(group.id, payer, payee, rng.randint(1, 10000))
                    service.get_settlement_plan(group.id)
            except Exception as e:
                errors.append(repr(e))

        threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == [], f"Concurrent writes raised exceptions: {errors}"

        group.ledger.check_invariants()
        assert sum(service.get_net_positions(group.id).values()) == 0

        history_count = len(service.list_expenses(group.id)) + len(service.list_payments(group.id))
        assert history_count == 8 * 50

        replayed = GroupBalanceSheet.replay(group.id, service.list_expenses(group.id), service.list_payments(group.id))
        assert replayed.net_positions() == service.get_net_positions(group.id)
