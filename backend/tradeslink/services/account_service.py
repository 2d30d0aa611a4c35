import logging
import time
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tradeslink.config import settings
from tradeslink.errors import AccountNotFound, DuplicateEmail, NotAClient, NotAContractor
from tradeslink.models.account import Account
from tradeslink.models.profile import Profile
from tradeslink.schemas.profile import CompanyProfile, ContractorProfile
from tradeslink.utils.security import generate_token, hash_password, verify_password

logger = logging.getLogger(__name__)

ROLES = ("client", "contractor")


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def default_avatar(account_id: str) -> str:
    return f"https://i.pravatar.cc/150?u={account_id}"


class AccountService:
    def __init__(self):
        self._sessions: dict[str, tuple[str, float]] = {}  # token -> (account_id, expires_at)

    def _cleanup_expired(self):
        now = time.time()
        self._sessions = {
            t: entry for t, entry in self._sessions.items() if entry[1] > now
        }

    # --- provisioning ---

    def sign_up(
        self,
        db: Session,
        role: str,
        profile: CompanyProfile | ContractorProfile,
        email: str,
        password: str | None = None,
    ) -> Account:
        if role not in ROLES:
            raise ValueError(f"role must be one of {ROLES}")
        expected = CompanyProfile if role == "client" else ContractorProfile
        if not isinstance(profile, expected):
            raise ValueError(f"{role} sign-up requires a {expected.__name__}")

        email = email.strip().lower()
        if db.query(Account).filter(Account.email == email).first():
            logger.info("Sign-up rejected, email already registered: %s", email)
            raise DuplicateEmail(email)

        now = _now()
        account_id = str(uuid.uuid4())
        account = Account(
            id=account_id,
            role=role,
            name=profile.contact_person.full_name,
            email=email,
            avatar=profile.logo_url or default_avatar(account_id),
            company_name=profile.company_name,
            balance_credits=0,
            skills=list(profile.skills) if role == "contractor" else [],
            rating=0,
            password_hash=hash_password(password) if password else None,
            created_at=now,
        )
        db.add(account)
        db.add(Profile(id=account_id, role=role, data=profile.model_dump(), views=0, updated_at=now))
        try:
            db.commit()
        except IntegrityError:
            # lost a race against another sign-up with the same email
            db.rollback()
            raise DuplicateEmail(email)
        db.refresh(account)

        logger.info("Provisioned %s account %s", role, account_id)
        return account

    def get_account(self, db: Session, account_id: str) -> Account:
        account = db.get(Account, account_id)
        if account is None:
            raise AccountNotFound(account_id)
        return account

    def get_client(self, db: Session, account_id: str) -> Account:
        account = self.get_account(db, account_id)
        if account.role != "client":
            raise NotAClient(account_id)
        return account

    def get_contractor(self, db: Session, account_id: str) -> Account:
        account = self.get_account(db, account_id)
        if account.role != "contractor":
            raise NotAContractor(account_id)
        return account

    # --- sessions ---

    def login(self, db: Session, email: str, password: str) -> dict | None:
        account = db.query(Account).filter(Account.email == email.strip().lower()).first()
        if account is None or not account.password_hash:
            return None
        if not verify_password(account.password_hash, password):
            logger.info("Failed login for %s", account.id)
            return None

        token = generate_token()
        self._sessions[token] = (account.id, time.time() + settings.session_ttl_seconds)
        return {
            "token": token,
            "account_id": account.id,
            "expires_in_seconds": settings.session_ttl_seconds,
        }

    def logout(self, token: str):
        self._sessions.pop(token, None)

    def resolve_token(self, token: str) -> str | None:
        self._cleanup_expired()
        entry = self._sessions.get(token)
        return entry[0] if entry else None

    def clear_sessions(self):
        self._sessions.clear()

    # --- profiles ---

    def get_profile(self, db: Session, account_id: str, role: str) -> Profile:
        account = self.get_client(db, account_id) if role == "client" else self.get_contractor(db, account_id)
        return account.profile

    def update_profile(
        self,
        db: Session,
        account_id: str,
        profile: CompanyProfile | ContractorProfile,
    ) -> Profile:
        if isinstance(profile, CompanyProfile):
            account = self.get_client(db, account_id)
        else:
            account = self.get_contractor(db, account_id)
            account.skills = list(profile.skills)

        account.name = profile.contact_person.full_name
        account.company_name = profile.company_name
        if profile.logo_url:
            account.avatar = profile.logo_url

        row = account.profile
        row.data = profile.model_dump()
        row.updated_at = _now()
        db.commit()
        db.refresh(row)
        return row

    def record_profile_view(self, db: Session, account_id: str) -> Profile:
        account = self.get_contractor(db, account_id)
        row = account.profile
        row.views = Profile.views + 1
        db.commit()
        db.refresh(row)
        return row


account_service = AccountService()
