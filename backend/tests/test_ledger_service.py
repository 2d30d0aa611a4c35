import pytest

from tradeslink.errors import InsufficientCredits, PackageNotFound
from tradeslink.models.account import Account
from tradeslink.models.job import JobUnlock
from tradeslink.models.transaction import Transaction
from tradeslink.schemas.job import JobDetails
from tradeslink.schemas.profile import CompanyProfile, ContractorProfile
from tradeslink.services import registry_service
from tradeslink.services.account_service import account_service
from tradeslink.services.ledger_service import ledger_service

from conftest import company_profile, contractor_profile, job_details


@pytest.fixture
def client_account(db):
    account = account_service.sign_up(
        db, "client", CompanyProfile.model_validate(company_profile()), "client@example.com",
    )
    return account


@pytest.fixture
def contractor_account(db):
    return account_service.sign_up(
        db, "contractor", ContractorProfile.model_validate(contractor_profile()), "contractor@example.com",
    )


def _fund(db, account, credits):
    account.balance_credits = credits
    db.commit()


class TestLedgerService:
    def test_purchase_then_history_newest_first(self, db, client_account):
        ledger_service.purchase_credits(db, client_account.id, "pkg1")
        _, second = ledger_service.purchase_credits(db, client_account.id, "pkg2")

        txs = ledger_service.list_transactions(db, client_account.id)
        assert [t.id for t in txs][0] == second.id
        assert [t.amount for t in txs] == [80, 45]
        assert db.get(Account, client_account.id).balance_credits == 150

    def test_unknown_package(self, db, client_account):
        with pytest.raises(PackageNotFound):
            ledger_service.purchase_credits(db, client_account.id, "pkg0")

    def test_balance_equals_credit_sum(self, db, client_account, contractor_account):
        ledger_service.purchase_credits(db, client_account.id, "pkg1")
        job, _, _ = ledger_service.post_job(db, client_account.id, JobDetails.model_validate(job_details()))

        ledger_service.purchase_credits(db, contractor_account.id, "pkg1")
        ledger_service.unlock_contact(db, job.id, contractor_account.id)
        ledger_service.unlock_contact(db, job.id, contractor_account.id)

        assert db.get(Account, client_account.id).balance_credits == 50 - 30
        assert db.get(Account, contractor_account.id).balance_credits == 50 - 10
        debits = db.query(Transaction).filter(Transaction.amount < 0).count()
        assert debits == 2

    def test_failed_post_changes_nothing(self, db, client_account):
        _fund(db, client_account, 10)
        with pytest.raises(InsufficientCredits) as exc:
            ledger_service.post_job(db, client_account.id, JobDetails.model_validate(job_details()))
        assert exc.value.required == 30
        assert exc.value.balance == 10
        assert db.get(Account, client_account.id).balance_credits == 10
        assert db.query(Transaction).count() == 0

    def test_exact_balance_reaches_zero(self, db, client_account, contractor_account):
        _fund(db, client_account, 30)
        job, client, tx = ledger_service.post_job(db, client_account.id, JobDetails.model_validate(job_details()))
        assert client.balance_credits == 0
        assert tx.amount == -30

        _fund(db, contractor_account, 10)
        _, contractor, unlock, charged = ledger_service.unlock_contact(db, job.id, contractor_account.id)
        assert charged is True
        assert contractor.balance_credits == 0
        assert db.get(JobUnlock, (job.id, contractor_account.id)) is not None

    def test_stale_balance_cannot_overdraw(self, db, test_db, contractor_account, client_account):
        _fund(db, client_account, 30)
        job, _, _ = ledger_service.post_job(db, client_account.id, JobDetails.model_validate(job_details()))
        _fund(db, contractor_account, 10)

        # another session spends the credits after this one loaded the account
        other = test_db()
        try:
            other.get(Account, contractor_account.id).balance_credits = 0
            other.commit()
        finally:
            other.close()

        with pytest.raises(InsufficientCredits):
            ledger_service.unlock_contact(db, job.id, contractor_account.id)
        assert db.get(Account, contractor_account.id).balance_credits == 0
        assert not registry_service.has_unlocked(db, job.id, contractor_account.id)
