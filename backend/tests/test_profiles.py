from conftest import company_profile, contractor_profile


class TestCompanyProfile:
    def test_get_profile(self, client, signup):
        client_id, _ = signup("client")
        r = client.get(f"/api/v1/clients/{client_id}/profile")
        assert r.status_code == 200
        data = r.json()
        assert data["id"] == client_id
        assert data["views"] == 0
        assert data["profile"]["company_name"] == "Acme Bau GmbH"
        assert data["profile"]["status"] == "draft"

    def test_update_profile_mirrors_account(self, client, signup):
        client_id, h = signup("client")
        profile = company_profile(name="Acme Hochbau AG", contact="Berta Klein")
        profile["status"] = "published"
        r = client.put(f"/api/v1/clients/{client_id}/profile", json=profile, headers=h)
        assert r.status_code == 200
        assert r.json()["profile"]["status"] == "published"

        account = client.get(f"/api/v1/accounts/{client_id}", headers=h).json()
        assert account["company_name"] == "Acme Hochbau AG"
        assert account["name"] == "Berta Klein"

    def test_update_requires_own_session(self, client, signup):
        client_id, _ = signup("client", email="one@example.com")
        _, other_h = signup("client", email="two@example.com")
        r = client.put(f"/api/v1/clients/{client_id}/profile", json=company_profile(), headers=other_h)
        assert r.status_code == 403

    def test_contractor_is_not_a_company(self, client, signup):
        contractor_id, _ = signup("contractor")
        r = client.get(f"/api/v1/clients/{contractor_id}/profile")
        assert r.status_code == 403
        assert r.json()["error"] == "NotAClient"


class TestContractorProfile:
    def test_get_profile(self, client, signup):
        contractor_id, _ = signup("contractor")
        r = client.get(f"/api/v1/contractors/{contractor_id}/profile")
        assert r.status_code == 200
        data = r.json()
        assert data["rating"] == 0
        assert data["profile"]["skills"] == ["bricklayer"]

    def test_update_skills(self, client, signup):
        contractor_id, h = signup("contractor")
        profile = contractor_profile()
        profile["skills"] = ["plasterer", "painter"]
        profile["experience_years"] = 12
        r = client.put(f"/api/v1/contractors/{contractor_id}/profile", json=profile, headers=h)
        assert r.status_code == 200
        assert r.json()["profile"]["experience_years"] == 12

        account = client.get(f"/api/v1/accounts/{contractor_id}", headers=h).json()
        assert account["skills"] == ["plasterer", "painter"]

    def test_record_views(self, client, signup):
        contractor_id, _ = signup("contractor")
        client.post(f"/api/v1/contractors/{contractor_id}/profile/views")
        r = client.post(f"/api/v1/contractors/{contractor_id}/profile/views")
        assert r.json()["views"] == 2

    def test_unknown_contractor(self, client):
        r = client.get("/api/v1/contractors/nobody/profile")
        assert r.status_code == 404
        assert r.json()["error"] == "AccountNotFound"
