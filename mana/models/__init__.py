from .user import User
from .settings import SiteSetting
from .portfolio import Project
from .careers import JobListing, Application
from .inquiry import QuoteRequest, ContactMessage
