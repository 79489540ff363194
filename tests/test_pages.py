import io

from sqlalchemy.exc import OperationalError

from mana.extensions import db
from mana.models.careers import Application, JobListing
from mana.models.inquiry import ContactMessage, QuoteRequest
from mana.models.portfolio import Project
from mana.models.settings import SiteSetting
from mana.services import page_cache
from mana.services.settings_service import get_site_settings


def _project(title, category="Repair"):
    p = Project(title={"en": title, "fr": f"{title} (fr)"}, description={"en": f"{title} description"},
                category=category, image_url=f"https://img.example.com/{title}.jpg")
    db.session.add(p)
    db.session.commit()
    return p


def _job(status="PUBLISHED"):
    job = JobListing(title={"en": "Welder", "ar": "لحام"}, description={"en": "MIG and TIG"},
                     requirements={"en": "Three years of experience"}, status=status)
    db.session.add(job)
    db.session.commit()
    return job


class TestPublicPages:
    def test_static_pages_render(self, client):
        for path in ("/en/", "/en/about", "/en/services", "/fr/portfolio", "/ar/contact", "/en/quote", "/en/recruitment"):
            assert client.get(path).status_code == 200, path

    def test_home_shows_three_latest_projects(self, client):
        for name in ("Alpha", "Bravo", "Charlie", "Delta"):
            _project(name)
        html = client.get("/en/").get_data(as_text=True)
        assert html.count('class="card"') == 3

    def test_localized_titles_fall_back_to_english(self, client):
        p = _project("Pump")
        assert "Pump (fr)" in client.get(f"/fr/portfolio/{p.id}").get_data(as_text=True)
        assert "Pump" in client.get(f"/ar/portfolio/{p.id}").get_data(as_text=True)

    def test_portfolio_category_filter(self, client):
        _project("Shaft", "Machining")
        _project("Frame", "Fabrication")
        html = client.get("/en/portfolio?category=Machining").get_data(as_text=True)
        assert "Shaft" in html
        assert "Frame description" not in html
        assert "Fabrication" in html  # still offered as a filter

    def test_missing_project_is_404(self, client):
        assert client.get("/en/portfolio/unknown").status_code == 404

    def test_settings_fallback_when_db_fails(self, client, monkeypatch):
        def broken():
            raise OperationalError("SELECT 1", {}, Exception("db down"))

        monkeypatch.setattr("mana.services.settings_service.get_site_settings", broken)
        r = client.get("/en/about")
        assert r.status_code == 200
        r = client.get("/en/contact")
        assert "contact@manaworkshops.com" in r.get_data(as_text=True)

    def test_fallback_settings_are_not_cached(self, client, monkeypatch):
        def broken():
            raise OperationalError("SELECT 1", {}, Exception("db down"))

        monkeypatch.setattr("mana.services.settings_service.get_site_settings", broken)
        assert client.get("/en/contact").status_code == 200
        assert "contact" not in page_cache.cached_pages()
        monkeypatch.undo()

        settings = get_site_settings()
        settings.phone = "+9 999"
        db.session.commit()

        assert "+9 999" in client.get("/en/contact").get_data(as_text=True)
        assert "contact" in page_cache.cached_pages()

    def test_contact_shows_business_hours(self, client):
        html = client.get("/fr/contact").get_data(as_text=True)
        assert "Samedi" in html
        assert "09:00 - 13:00" in html


class TestPublicForms:
    def test_contact_form_posts(self, client):
        r = client.post("/en/contact", data={
            "name": "Yusuf", "email": "yusuf@example.com", "subject": "Hydraulic cylinder",
            "message": "Our loader cylinder is leaking, can you reseal it?",
        })
        assert r.status_code == 302
        assert ContactMessage.query.count() == 1

    def test_contact_form_errors_rerender(self, client):
        r = client.post("/en/contact", data={"name": "Y", "email": "x", "subject": "", "message": ""})
        assert r.status_code == 200
        assert b"has-error" in r.data
        assert ContactMessage.query.count() == 0

    def test_quote_with_attachment(self, client, fake_media_host):
        r = client.post("/en/quote", data={
            "firstName": "Amina", "lastName": "Benali", "email": "amina@example.com",
            "phone": "+212 600 000 000", "serviceType": "Repair", "urgency": "Critical",
            "description": "Combine harvester header drive is broken mid-season.",
            "attachment": (io.BytesIO(b"\x89PNG"), "header.png", "image/png"),
        }, content_type="multipart/form-data")
        assert r.status_code == 302
        q = QuoteRequest.query.one()
        assert q.file_url.endswith("/header.png")
        assert q.urgency == "Critical"

    def test_quote_without_attachment(self, client):
        r = client.post("/en/quote", data={
            "firstName": "Amina", "lastName": "Benali", "email": "amina@example.com",
            "phone": "+212 600 000 000", "serviceType": "Other", "urgency": "Low",
            "description": "Looking for a yearly maintenance contract.",
        })
        assert r.status_code == 302
        assert QuoteRequest.query.one().file_url is None


class TestApplicationForm:
    def _data(self, cv):
        return {"fullName": "Karim Haddad", "email": "karim@example.com", "phone": "0555123456", "cv": cv}

    def test_apply_with_cv(self, client, fake_media_host):
        job = _job()
        r = client.post(f"/ar/recruitment/{job.id}", data=self._data((io.BytesIO(b"%PDF-1.4"), "cv.pdf")),
                        content_type="multipart/form-data")
        assert r.status_code == 302
        a = Application.query.one()
        assert a.cv_url.endswith("/cv.pdf")
        assert a.job_id == job.id

    def test_cv_extension_is_checked(self, client, fake_media_host):
        job = _job()
        r = client.post(f"/en/recruitment/{job.id}", data=self._data((io.BytesIO(b"MZ"), "cv.exe")),
                        content_type="multipart/form-data")
        assert r.status_code == 200
        assert b"CV must be PDF, DOC, or DOCX." in r.data
        assert fake_media_host == []

    def test_cv_size_is_checked(self, app, client, fake_media_host):
        app.config["CV_MAX_BYTES"] = 10
        job = _job()
        r = client.post(f"/en/recruitment/{job.id}", data=self._data((io.BytesIO(b"x" * 64), "cv.pdf")),
                        content_type="multipart/form-data")
        assert r.status_code == 200
        assert Application.query.count() == 0

    def test_unpublished_job_is_404(self, client):
        job = _job(status="DRAFT")
        assert client.get(f"/en/recruitment/{job.id}").status_code == 404

    def test_recruitment_lists_published_only(self, client):
        _job()
        _job(status="ARCHIVED")
        html = client.get("/ar/recruitment").get_data(as_text=True)
        assert html.count('class="card job"') == 1
        assert "لحام" in html


class TestAdminPages:
    def test_dashboard_counts(self, admin_client):
        _project("Alpha")
        _job()
        html = admin_client.get("/en/admin/").get_data(as_text=True)
        assert "<strong>1</strong> Projects" in html
        assert "<strong>1</strong> Published jobs" in html

    def test_every_section_renders(self, admin_client):
        for section in ("portfolio", "recruitment", "applications", "quotes", "messages", "settings"):
            assert admin_client.get(f"/en/admin/{section}").status_code == 200, section

    def test_portfolio_create_from_url(self, admin_client):
        r = admin_client.post("/en/admin/portfolio/new", data={
            "title_en": "Pump housing", "title_fr": "Corps de pompe", "category": "Machining",
            "image_url": "https://img.example.com/pump.jpg",
        })
        assert r.status_code == 302
        p = Project.query.one()
        assert p.title == {"en": "Pump housing", "fr": "Corps de pompe", "ar": ""}

    def test_portfolio_create_requires_image(self, admin_client):
        admin_client.post("/en/admin/portfolio/new", data={"title_en": "No image"})
        assert Project.query.count() == 0

    def test_recruitment_create_and_toggle(self, admin_client):
        admin_client.post("/en/admin/recruitment/new", data={"title_en": "Turner", "jobType": "PART_TIME"})
        job = JobListing.query.one()
        assert job.status == "DRAFT"
        admin_client.post(f"/en/admin/recruitment/{job.id}/toggle")
        assert db.session.get(JobListing, job.id).status == "PUBLISHED"
        admin_client.post(f"/en/admin/recruitment/{job.id}/toggle")
        assert db.session.get(JobListing, job.id).status == "ARCHIVED"

    def test_settings_form_saves(self, admin_client):
        r = admin_client.post("/en/admin/settings", data={"siteName": "MANA Ateliers", "businessHoursSun": "By appointment"})
        assert r.status_code == 302
        s = SiteSetting.query.one()
        assert s.site_name == "MANA Ateliers"
        assert s.business_hours_sun == "By appointment"

    def test_quote_status_and_delete(self, admin_client):
        q = QuoteRequest(first_name="Lea", last_name="Martin", email="lea@example.com", phone="0102030405",
                         description="Fabricate a trailer hitch for a compact tractor.")
        db.session.add(q)
        db.session.commit()
        assert b"Lea Martin" in admin_client.get(f"/en/admin/quotes/{q.id}").data
        admin_client.post(f"/en/admin/quotes/{q.id}/status", data={"status": "REVIEWED"})
        assert db.session.get(QuoteRequest, q.id).status == "REVIEWED"
        admin_client.post(f"/en/admin/quotes/{q.id}/delete")
        assert QuoteRequest.query.count() == 0

    def test_application_update_from_page(self, admin_client):
        job = _job()
        a = Application(job_id=job.id, full_name="Karim Haddad", email="karim@example.com", phone="0555123456",
                        cv_url="https://img.example.com/cv.pdf")
        db.session.add(a)
        db.session.commit()
        admin_client.post(f"/en/admin/applications/{a.id}", data={"status": "HIRED", "notes": "Starts Monday"})
        a = db.session.get(Application, a.id)
        assert (a.status, a.notes) == ("HIRED", "Starts Monday")

    def test_missing_record_is_404(self, admin_client):
        assert admin_client.post("/en/admin/messages/nope/delete").status_code == 404
