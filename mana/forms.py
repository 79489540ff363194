# mana/forms.py
"""Public submission forms.

Field names follow the JSON wire format (``firstName``, ``jobId`` ...) so one
form class validates both a JSON body and the HTML form of the same page.
API callers pass ``meta={"csrf": False}``.
"""
from flask import current_app
from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileAllowed, FileRequired
from wtforms import (
    StringField,
    PasswordField,
    TextAreaField,
    SelectField,
    SubmitField,
    HiddenField,
)
from wtforms.validators import (
    DataRequired,
    Email,
    Length,
    URL,
    Optional as Opt,
    ValidationError,
)

from .models.inquiry import SERVICE_TYPES, URGENCY_LEVELS

CV_EXTENSIONS = ["pdf", "doc", "docx"]


# -------------
# Contact
# -------------

class ContactForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(min=2, max=120, message="Name must be at least 2 characters.")])
    email = StringField("Email", validators=[DataRequired(), Email(message="Invalid email address"), Length(max=255)])
    subject = StringField("Subject", validators=[DataRequired(), Length(min=5, max=200, message="Subject must be at least 5 characters.")])
    message = TextAreaField("Message", validators=[DataRequired(), Length(min=20, message="Message must be at least 20 characters.")])
    submit = SubmitField("Send message")


# -------------
# Quote
# -------------

class QuoteForm(FlaskForm):
    firstName = StringField("First name", validators=[DataRequired(), Length(min=2, max=120, message="First name is required")])
    lastName = StringField("Last name", validators=[DataRequired(), Length(min=2, max=120, message="Last name is required")])
    email = StringField("Email", validators=[DataRequired(), Email(message="Invalid email address"), Length(max=255)])
    company = StringField("Company", validators=[Opt(), Length(max=160)])
    phone = StringField("Phone", validators=[DataRequired(), Length(min=5, max=50, message="Valid phone number required")])
    description = TextAreaField(
        "Project description",
        validators=[DataRequired(), Length(min=20, message="Please provide more detail about your project")],
    )
    serviceType = SelectField("Service", choices=[(s, s) for s in SERVICE_TYPES], validators=[DataRequired()])
    urgency = SelectField("Urgency", choices=[(u, u) for u in URGENCY_LEVELS], validators=[DataRequired()])
    fileUrl = StringField("File URL", validators=[Opt(), URL(require_tld=False), Length(max=500)])
    submit = SubmitField("Request quote")


class QuoteUploadForm(QuoteForm):
    attachment = FileField("Blueprint / drawing")


# -------------
# Recruitment
# -------------

class ApplicantForm(FlaskForm):
    fullName = StringField("Full name", validators=[DataRequired(), Length(min=3, max=160, message="Full name is required")])
    email = StringField("Email", validators=[DataRequired(), Email(message="Invalid email address"), Length(max=255)])
    phone = StringField("Phone", validators=[DataRequired(), Length(min=5, max=80, message="Valid phone number required")])
    message = TextAreaField("Message", validators=[Opt(), Length(max=5000)])
    submit = SubmitField("Submit application")


class ApplicationForm(ApplicantForm):
    jobId = StringField("Position", validators=[DataRequired(message="Please select a position")])
    cvUrl = StringField("CV", validators=[DataRequired(message="CV upload is required"), Length(max=500)])


class ApplicationUploadForm(ApplicantForm):
    cv = FileField("CV", validators=[
        FileRequired(message="CV upload is required"),
        FileAllowed(CV_EXTENSIONS, message="CV must be PDF, DOC, or DOCX."),
    ])

    def validate_cv(self, field):
        limit = current_app.config.get("CV_MAX_BYTES", 5 * 1024 * 1024)
        stream = field.data.stream
        stream.seek(0, 2)
        size = stream.tell()
        stream.seek(0)
        if size > limit:
            raise ValidationError(f"CV must be {limit // (1024 * 1024)}MB or smaller.")


# -------------
# Admin login
# -------------

class LoginForm(FlaskForm):
    email = StringField("Email", validators=[DataRequired(), Email(), Length(max=255)])
    password = PasswordField("Password", validators=[DataRequired()])
    submit = SubmitField("Sign in")

    next = HiddenField()
