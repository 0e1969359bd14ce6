from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, redirect, session, url_for

from .model import SessionUser

SESSION_EMAIL_KEY = "user_email"
SESSION_NAME_KEY = "user_name"


def current_user() -> Optional[SessionUser]:
    email = session.get(SESSION_EMAIL_KEY)
    if not email:
        return None
    return SessionUser(email=email, name=session.get(SESSION_NAME_KEY))


def login_required(view):
    """Pages: send anonymous visitors to the sign-in page."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_EMAIL_KEY not in session:
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def api_login_required(view):
    """JSON endpoints: answer 401 instead of redirecting."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_EMAIL_KEY not in session:
            return jsonify({"error": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper
