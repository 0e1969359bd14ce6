from __future__ import annotations

from flask import Flask, jsonify, render_template

from ..container import Container
from ..core.exceptions import ConfigurationError, UpstreamError
from ..users.guards import api_login_required, current_user, login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/healthz", endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok"})

    @app.route("/api/data", methods=["GET"], endpoint="api_data")
    @api_login_required
    def api_data():
        try:
            return jsonify(container.roster_service.get_roster_json())
        except ConfigurationError as e:
            app.logger.error("Configuration error: %s", e)
            return jsonify({"error": str(e)}), 500
        except UpstreamError as e:
            app.logger.warning("Upstream error (%s): %s", e.status_code, e.message)
            return jsonify({"error": e.message}), e.http_status()
        except Exception as e:
            app.logger.exception("Unexpected error building roster")
            return jsonify({"error": str(e)}), 500

    @app.route("/", endpoint="dashboard")
    @login_required
    def dashboard():
        service = container.roster_service
        now = service.now()
        week_dates = service.week_dates(now)
        error = None
        roster = {}
        try:
            roster = service.get_roster(now)
        except (ConfigurationError, UpstreamError) as e:
            app.logger.warning("Dashboard could not load roster: %s", e)
            error = str(e)
        except Exception:
            app.logger.exception("Unexpected error building roster")
            error = "Unexpected error loading the roster"

        days = service.build_week(roster, week_dates)
        return render_template("dashboard.html", days=days, error=error, user=current_user())
