# Quote requests and contact messages
from flask import render_template, redirect, url_for, flash, abort, request
from flask_login import login_required

from ...extensions import db
from ...models.inquiry import ContactMessage, QuoteRequest, QUOTE_STATUSES
from . import admin_bp


@admin_bp.route("/quotes")
@login_required
def quotes_list():
    status = (request.args.get("status") or "").strip().upper()
    q = QuoteRequest.query
    if status in QUOTE_STATUSES:
        q = q.filter(QuoteRequest.status == status)
    quotes = q.order_by(QuoteRequest.created_at.desc()).all()
    return render_template("admin/quotes.html", quotes=quotes, statuses=QUOTE_STATUSES, status=status)


@admin_bp.route("/quotes/<quote_id>")
@login_required
def quote_detail(quote_id):
    quote = db.session.get(QuoteRequest, quote_id)
    if quote is None:
        abort(404)
    return render_template("admin/quote_detail.html", quote=quote, statuses=QUOTE_STATUSES)


@admin_bp.route("/quotes/<quote_id>/status", methods=["POST"])
@login_required
def quote_status(quote_id):
    quote = db.session.get(QuoteRequest, quote_id)
    if quote is None:
        abort(404)
    status = (request.form.get("status") or "").strip().upper()
    if status not in QUOTE_STATUSES:
        flash("Invalid status.", "warning")
    else:
        quote.status = status
        db.session.commit()
        flash(f"Status set to {status}.", "success")
    return redirect(url_for("admin.quote_detail", quote_id=quote.id))


@admin_bp.route("/quotes/<quote_id>/delete", methods=["POST"])
@login_required
def quote_delete(quote_id):
    quote = db.session.get(QuoteRequest, quote_id)
    if quote is None:
        abort(404)
    db.session.delete(quote)
    db.session.commit()
    flash("Quote deleted.", "success")
    return redirect(url_for("admin.quotes_list"))


@admin_bp.route("/messages")
@login_required
def messages_list():
    messages = ContactMessage.query.order_by(ContactMessage.created_at.desc()).all()
    return render_template("admin/messages.html", messages=messages)


@admin_bp.route("/messages/<message_id>/delete", methods=["POST"])
@login_required
def message_delete(message_id):
    msg = db.session.get(ContactMessage, message_id)
    if msg is None:
        abort(404)
    db.session.delete(msg)
    db.session.commit()
    flash("Message deleted.", "success")
    return redirect(url_for("admin.messages_list"))
