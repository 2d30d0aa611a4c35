from tradeslink.models.account import Account
from tradeslink.models.job import Job
from tradeslink.seed import DEMO_CLIENT_ID, DEMO_CONTRACTOR_ID, seed_demo_data
from tradeslink.services.account_service import account_service


class TestSeed:
    def test_seed_creates_demo_accounts_and_jobs(self, db):
        counts = seed_demo_data(db)
        assert counts == {"accounts": 2, "jobs": 6}

        assert db.get(Account, DEMO_CLIENT_ID).role == "client"
        assert db.get(Account, DEMO_CONTRACTOR_ID).skills == ["bricklayer", "concrete_worker"]
        jobs = db.query(Job).all()
        assert len(jobs) == 6
        assert all(j.applications == 0 for j in jobs)
        assert db.get(Job, "job-3").budget_type == "fixed"

    def test_seed_is_idempotent(self, db):
        seed_demo_data(db)
        assert seed_demo_data(db) == {"accounts": 0, "jobs": 0}
        assert db.query(Job).count() == 6

    def test_demo_accounts_can_log_in(self, db, fresh_sessions):
        from tradeslink.config import settings

        seed_demo_data(db)
        session = account_service.login(db, "client@test.com", settings.demo_password)
        assert session["account_id"] == DEMO_CLIENT_ID
