from mana.models.user import User

from .conftest import ADMIN_EMAIL, login


class TestCreateAdmin:
    def test_creates_admin_who_can_sign_in(self, app, client):
        runner = app.test_cli_runner()
        result = runner.invoke(args=[
            "create-admin", "--email", " Foreman@Mana-Industrial.com ", "--name", "Foreman",
            "--password", "forge-pass-456",
        ])
        assert result.exit_code == 0, result.output
        assert "created successfully" in result.output

        user = User.query.filter_by(email="foreman@mana-industrial.com").one()
        assert user.role == "ADMIN"
        assert user.name == "Foreman"
        assert login(client, email="foreman@mana-industrial.com", password="forge-pass-456").status_code == 200

    def test_existing_email_is_left_alone(self, app):
        runner = app.test_cli_runner()
        result = runner.invoke(args=["create-admin", "--email", ADMIN_EMAIL, "--name", "", "--password", "x"])
        assert result.exit_code == 0
        assert "already exists" in result.output
        assert User.query.filter_by(email=ADMIN_EMAIL).count() == 1

    def test_init_db(self, app):
        result = app.test_cli_runner().invoke(args=["init-db"])
        assert result.exit_code == 0
        assert "Database tables created." in result.output
