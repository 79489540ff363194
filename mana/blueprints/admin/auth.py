from flask import render_template, redirect, url_for, flash, g, current_app, request
from flask_login import current_user, login_required

from ...forms import LoginForm
from ...security import authenticate, issue_token, set_auth_cookie, clear_auth_cookie
from . import admin_bp
from .utils import safe_next


@admin_bp.route("/login", methods=["GET", "POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("admin.dashboard"))

    form = LoginForm()
    if request.method == "GET":
        form.next.data = request.args.get("next", "")

    if form.validate_on_submit():
        user = authenticate(form.email.data, form.password.data)
        if user is None or not user.is_admin:
            current_app.logger.info("Failed admin login for %s", (form.email.data or "").strip().lower())
            flash("Invalid credentials", "danger")
            return render_template("admin/login.html", form=form), 401

        resp = redirect(safe_next(form.next.data) or url_for("admin.dashboard"))
        set_auth_cookie(resp, issue_token(user))
        current_app.logger.info("Admin %s signed in", user.email)
        return resp

    return render_template("admin/login.html", form=form)


@admin_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    resp = redirect(url_for("admin.login", locale=g.locale))
    clear_auth_cookie(resp)
    flash("Signed out.", "info")
    return resp
