"""
Domain errors raised by the services.

Every error carries a stable ``code`` that is returned to API callers as a
typed result, plus the HTTP status the exception handler in ``main`` uses.
"""


class MarketError(Exception):
    code = "MarketError"
    status_code = 400

    def __init__(self, message: str, **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": self.message, **self.extra}


class InsufficientCredits(MarketError):
    code = "InsufficientCredits"
    status_code = 402

    def __init__(self, required: int, balance: int):
        super().__init__(
            f"Not enough credits: {required} required, {balance} available.",
            required=required,
            balance=balance,
            top_up="/credits/packages",
        )
        self.required = required
        self.balance = balance


class JobNotFound(MarketError):
    code = "JobNotFound"
    status_code = 404

    def __init__(self, job_id: str):
        super().__init__(f"Job {job_id} not found.", job_id=job_id)


class AccountNotFound(MarketError):
    code = "AccountNotFound"
    status_code = 404

    def __init__(self, account_id: str):
        super().__init__(f"Account {account_id} not found.", account_id=account_id)


class PackageNotFound(MarketError):
    code = "PackageNotFound"
    status_code = 404

    def __init__(self, package_id: str):
        super().__init__(f"Credit package {package_id} not found.", package_id=package_id)


class DuplicateEmail(MarketError):
    code = "DuplicateEmail"
    status_code = 409

    def __init__(self, email: str):
        super().__init__("User with this email already exists.", email=email)


class AlreadyApplied(MarketError):
    code = "AlreadyApplied"
    status_code = 409

    def __init__(self, job_id: str):
        super().__init__("You have already applied for this job.", job_id=job_id)


class ContactNotUnlocked(MarketError):
    code = "ContactNotUnlocked"
    status_code = 403

    def __init__(self, job_id: str):
        super().__init__("Contact details for this job are not unlocked.", job_id=job_id)


class NotAClient(MarketError):
    code = "NotAClient"
    status_code = 403

    def __init__(self, account_id: str):
        super().__init__("Only client accounts can do this.", account_id=account_id)


class NotAContractor(MarketError):
    code = "NotAContractor"
    status_code = 403

    def __init__(self, account_id: str):
        super().__init__("Only contractor accounts can do this.", account_id=account_id)


class NotJobOwner(MarketError):
    code = "NotJobOwner"
    status_code = 403

    def __init__(self, job_id: str):
        super().__init__("Only the client who posted this job can change it.", job_id=job_id)
