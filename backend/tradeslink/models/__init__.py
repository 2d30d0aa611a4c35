from tradeslink.models.account import Account
from tradeslink.models.profile import Profile
from tradeslink.models.transaction import Transaction
from tradeslink.models.job import Job, JobUnlock
from tradeslink.models.application import Application

__all__ = ["Account", "Profile", "Transaction", "Job", "JobUnlock", "Application"]
