"""
Credit ledger: balances, purchases, job posting and contact unlocks.

A balance never changes without a transaction row written in the same
database transaction. Debits are a conditional UPDATE so a concurrent
request cannot take the balance below zero.
"""
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tradeslink.config import settings
from tradeslink.errors import InsufficientCredits, MarketError, PackageNotFound
from tradeslink.models.account import Account
from tradeslink.models.job import Job, JobUnlock
from tradeslink.models.transaction import Transaction
from tradeslink.schemas.job import JobDetails
from tradeslink.schemas.ledger import CreditPackage
from tradeslink.services import job_service
from tradeslink.services.account_service import account_service
from tradeslink.utils.countries import resolve_country_code

logger = logging.getLogger(__name__)

CREDIT_PACKAGES: tuple[CreditPackage, ...] = (
    CreditPackage(id="pkg1", name="Starter", credits=50, price=45, price_per_credit=0.90, popular=False),
    CreditPackage(id="pkg2", name="Business", credits=100, price=80, price_per_credit=0.80, popular=True, economy="20% OFF"),
    CreditPackage(id="pkg3", name="Enterprise", credits=250, price=175, price_per_credit=0.70, popular=False, economy="30% OFF"),
)


def _short(title: str) -> str:
    return f"{title[:20]}..."


class LedgerService:
    def list_packages(self) -> list[CreditPackage]:
        return list(CREDIT_PACKAGES)

    def get_package(self, package_id: str) -> CreditPackage:
        for pkg in CREDIT_PACKAGES:
            if pkg.id == package_id:
                return pkg
        raise PackageNotFound(package_id)

    def list_transactions(self, db: Session, account_id: str) -> list[Transaction]:
        account_service.get_account(db, account_id)
        return (
            db.query(Transaction)
            .filter(Transaction.account_id == account_id)
            .order_by(Transaction.created_at.desc(), text("transactions.rowid DESC"))
            .all()
        )

    # --- operations ---

    def purchase_credits(self, db: Session, account_id: str, package_id: str) -> tuple[Account, Transaction]:
        pkg = self.get_package(package_id)
        account = account_service.get_account(db, account_id)

        db.execute(
            text("UPDATE accounts SET balance_credits = balance_credits + :credits WHERE id = :id"),
            {"credits": pkg.credits, "id": account.id},
        )
        tx_id = str(uuid.uuid4())
        tx = self._record(
            db, account.id, f"Purchase {pkg.name} Package", pkg.price,
            tx_id=tx_id, invoice_url=f"/invoices/{tx_id}",
        )
        db.commit()
        db.refresh(account)
        db.refresh(tx)

        logger.info(
            "Account %s bought %s (+%d credits), balance now %d",
            account.id, pkg.id, pkg.credits, account.balance_credits,
        )
        return account, tx

    def post_job(self, db: Session, client_id: str, details: JobDetails) -> tuple[Job, Account, Transaction]:
        client = account_service.get_client(db, client_id)
        cost = settings.job_post_cost

        try:
            self._debit(db, client, cost)
            job = job_service.build_job(client, details)
            db.add(job)
            tx = self._record(db, client.id, f"Job Posting: {_short(job.title)}", -cost)
            db.commit()
        except MarketError:
            db.rollback()
            raise

        db.refresh(client)
        db.refresh(job)
        db.refresh(tx)
        logger.info("Client %s posted job %s, balance now %d", client.id, job.id, client.balance_credits)
        return job, client, tx

    def unlock_contact(self, db: Session, job_id: str, contractor_id: str) -> tuple[Job, Account, JobUnlock, bool]:
        """
        Reveal a job poster's contact details to a contractor.

        Keyed on (job, contractor): repeating the call returns the existing
        unlock with ``charged=False`` and never debits twice.
        """
        job = job_service.get_job(db, job_id)
        contractor = account_service.get_contractor(db, contractor_id)

        existing = db.get(JobUnlock, (job_id, contractor_id))
        if existing is not None:
            logger.info("Contractor %s already unlocked job %s", contractor_id, job_id)
            return job, contractor, existing, False

        cost = settings.unlock_cost
        profile_data = contractor.profile.data if contractor.profile else {}
        country = (profile_data.get("address") or {}).get("country")
        unlock = JobUnlock(
            job_id=job.id,
            contractor_id=contractor.id,
            contractor_name=profile_data.get("company_name") or contractor.company_name or contractor.name,
            contractor_country_code=(resolve_country_code(country) or settings.default_country_code).lower(),
            unlocked_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        )

        try:
            self._debit(db, contractor, cost)
            self._record(db, contractor.id, f"Unlock Contact: {_short(job.title)}", -cost)
            db.add(unlock)
            db.commit()
        except MarketError:
            db.rollback()
            raise
        except IntegrityError:
            # a concurrent request for the same pair committed first
            db.rollback()
            existing = db.get(JobUnlock, (job_id, contractor_id))
            if existing is None:
                raise
            db.refresh(contractor)
            return job, contractor, existing, False

        db.refresh(contractor)
        db.refresh(job)
        logger.info(
            "Contractor %s unlocked job %s (-%d credits), balance now %d",
            contractor.id, job.id, cost, contractor.balance_credits,
        )
        return job, contractor, unlock, True

    # --- internals ---

    def _debit(self, db: Session, account: Account, cost: int):
        if account.balance_credits < cost:
            logger.info("Account %s has %d credits, %d required", account.id, account.balance_credits, cost)
            raise InsufficientCredits(required=cost, balance=account.balance_credits)

        result = db.execute(
            text(
                """
                UPDATE accounts SET balance_credits = balance_credits - :cost
                WHERE id = :id AND balance_credits >= :cost
                """
            ),
            {"cost": cost, "id": account.id},
        )
        if result.rowcount != 1:
            db.rollback()
            db.refresh(account)
            logger.warning("Debit of %d raced for account %s", cost, account.id)
            raise InsufficientCredits(required=cost, balance=account.balance_credits)

    def _record(
        self,
        db: Session,
        account_id: str,
        description: str,
        amount: float,
        tx_id: str | None = None,
        invoice_url: str | None = None,
    ) -> Transaction:
        now = datetime.now(timezone.utc)
        tx = Transaction(
            id=tx_id or str(uuid.uuid4()),
            account_id=account_id,
            date=now.strftime("%Y-%m-%d"),
            description=description,
            amount=amount,
            status="Completed",
            invoice_url=invoice_url,
            created_at=now.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        )
        db.add(tx)
        return tx


ledger_service = LedgerService()
