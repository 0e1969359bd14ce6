from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError, AuthorizationError, ConfigurationError
from .guards import SESSION_EMAIL_KEY, SESSION_NAME_KEY

OAUTH_STATE_KEY = "oauth_state"


def register(app: Flask, container: Container) -> None:
    @app.route("/login", endpoint="login")
    def login():
        if SESSION_EMAIL_KEY in session:
            return redirect(url_for("dashboard"))
        return render_template("login.html")

    @app.route("/auth/google", endpoint="google_login")
    def google_login():
        state = container.auth_service.new_state()
        session[OAUTH_STATE_KEY] = state
        try:
            url = container.auth_service.authorization_url(
                redirect_uri=url_for("google_callback", _external=True),
                state=state,
            )
        except ConfigurationError as e:
            app.logger.error("Google sign-in is not configured: %s", e)
            flash("Google sign-in is not configured.", "danger")
            return redirect(url_for("login"))
        return redirect(url)

    @app.route("/auth/google/callback", endpoint="google_callback")
    def google_callback():
        expected_state = session.pop(OAUTH_STATE_KEY, None)

        if request.args.get("error"):
            flash("Sign-in was cancelled.", "warning")
            return redirect(url_for("login"))
        if not expected_state or request.args.get("state") != expected_state:
            flash("Sign-in session expired, please try again.", "warning")
            return redirect(url_for("login"))

        try:
            user = container.auth_service.authenticate(
                code=request.args.get("code", ""),
                redirect_uri=url_for("google_callback", _external=True),
            )
        except (AuthenticationError, AuthorizationError) as e:
            flash(str(e), "danger")
            return redirect(url_for("login"))
        except ConfigurationError as e:
            app.logger.error("Google sign-in is not configured: %s", e)
            flash("Google sign-in is not configured.", "danger")
            return redirect(url_for("login"))
        except Exception:
            app.logger.exception("Unexpected error during sign-in")
            flash("Unexpected error during sign-in.", "danger")
            return redirect(url_for("login"))

        session.permanent = True
        session[SESSION_EMAIL_KEY] = user.email
        session[SESSION_NAME_KEY] = user.name
        app.logger.info("Signed in %s", user.email)
        return redirect(url_for("dashboard"))

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("login"))
