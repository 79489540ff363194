from mana.i18n import translate, text_direction, normalize_localized, localized


class TestLocaleRouting:
    def test_root_redirects_to_accept_language(self, client):
        r = client.get("/", headers={"Accept-Language": "fr-FR,fr;q=0.9,en;q=0.5"})
        assert r.status_code == 302
        assert r.headers["Location"].endswith("/fr/")

    def test_root_defaults_to_english(self, client):
        r = client.get("/")
        assert r.status_code == 302
        assert r.headers["Location"].endswith("/en/")

    def test_visited_locale_is_remembered(self, client):
        assert client.get("/ar/").status_code == 200
        r = client.get("/", headers={"Accept-Language": "fr"})
        assert r.headers["Location"].endswith("/ar/")

    def test_path_without_locale_is_prefixed(self, client):
        r = client.get("/about?ref=ad")
        assert r.status_code == 302
        assert r.headers["Location"].endswith("/en/about?ref=ad")

    def test_unknown_path_is_404(self, client):
        assert client.get("/no-such-page").status_code == 404
        assert client.get("/no-such-page/").status_code == 404

    def test_bare_unsupported_locale_is_404(self, client):
        assert client.get("/de").status_code == 404
        assert client.get("/de/").status_code == 404

    def test_unsupported_locale_is_404(self, client):
        assert client.get("/de/about").status_code == 404

    def test_api_is_not_localized(self, client):
        r = client.get("/api/jobs")
        assert r.status_code == 200
        assert r.get_json() == []

    def test_arabic_renders_rtl(self, client):
        r = client.get("/ar/")
        html = r.get_data(as_text=True)
        assert 'lang="ar"' in html
        assert 'dir="rtl"' in html

    def test_french_strings_and_switcher(self, client):
        html = client.get("/fr/about").get_data(as_text=True)
        assert "Accueil" in html
        assert 'dir="ltr"' in html
        assert 'href="/ar/about"' in html

    def test_robots_txt(self, client):
        r = client.get("/robots.txt")
        assert r.status_code == 200
        body = r.get_data(as_text=True)
        assert "Disallow: /api/" in body
        assert "Disallow: /*/admin/" in body
        assert "Disallow: /*/login" in body
        assert "Sitemap: https://mana-industrial.com/sitemap.xml" in body


class TestBundles:
    def test_missing_key_falls_back_to_english(self, app):
        with app.test_request_context("/fr/"):
            assert translate("Footer.tagline", "fr") == translate("Footer.tagline", "en")
            assert translate("Services.guidanceDesc", "ar").startswith("Advice")
            assert translate("Nav.home", "fr") == "Accueil"

    def test_unknown_key_returns_key(self, app):
        with app.test_request_context("/en/"):
            assert translate("Nope.missing", "ar") == "Nope.missing"

    def test_direction(self, app):
        with app.app_context():
            assert text_direction("ar") == "rtl"
            assert text_direction("fr") == "ltr"

    def test_localized_values(self, app):
        with app.test_request_context("/en/"):
            assert normalize_localized("Lathe work") == {"en": "Lathe work"}
            assert normalize_localized({"fr": "Tour"}) == {"fr": "Tour", "en": "Tour"}
            assert localized({"en": "Lathe", "fr": ""}, "fr") == "Lathe"
            assert localized({"en": "Lathe", "ar": "مخرطة"}, "ar") == "مخرطة"


def test_resolve_locale_from_path(app):
    from mana.i18n import resolve_locale, path_locale

    with app.app_context():
        assert resolve_locale("/ar/portfolio/abc") == "ar"
        assert resolve_locale("/de/about") == "en"
        assert resolve_locale("/") == "en"
        assert path_locale("/fr") == "fr"
        assert path_locale("/api/jobs") is None
