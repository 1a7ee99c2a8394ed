"""
Forecast Feeling - Main Flask Application

A web application that tells how the current forecast feels (cold, moderate or hot)
for a pair of US coordinates, using the National Weather Service API.
Features include an HTML form, a JSON endpoint and a health check for Kubernetes.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify, render_template, request

from forecast.errors import ForecastError
from forecast.weather import fetch_forecast

app = Flask(__name__)

# Configure logging directory (environment variable or default)
log_dir = os.getenv("LOG_DIR", "./logs")
os.makedirs(log_dir, exist_ok=True)

log_file = os.path.join(log_dir, "forecast_app.log")

# Dual logging: file (for persistence) and stdout (for container logs)
file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
)

logging.basicConfig(level=logging.DEBUG, handlers=[file_handler, stdout_handler])

NWS_BASE_URL = os.getenv("NWS_BASE_URL", "https://api.weather.gov")
NWS_USER_AGENT = os.getenv("NWS_USER_AGENT", "forecast-feeling (contact@example.com)")
REQUEST_DEADLINE = float(os.getenv("REQUEST_DEADLINE", 15))

ERROR_NOTICE = "Could not get the forecast for these coordinates. Please try again."


def run_pipeline(latitude, longitude):
    return fetch_forecast(
        latitude,
        longitude,
        deadline=REQUEST_DEADLINE,
        base_url=NWS_BASE_URL,
        user_agent=NWS_USER_AGENT,
    )


@app.route("/", methods=["GET"])
def index():
    """Landing page - displays the coordinates form"""
    return render_template("index.html")


@app.route("/submit", methods=["POST"])
def submit():
    """Form submission - fetches and displays the forecast for the coordinates"""
    latitude = request.form.get("latitude", "").strip()
    longitude = request.form.get("longitude", "").strip()

    if not latitude or not longitude:
        return render_template("index.html", error="Latitude and longitude are required."), 400

    app.logger.info(f"Received form submission: latitude={latitude} longitude={longitude}")

    try:
        result = run_pipeline(latitude, longitude)
    except ForecastError as e:
        app.logger.error(f"Forecast failed: {e}, for coordinates: {latitude},{longitude}")
        return render_template("index.html", error=ERROR_NOTICE), 502

    return render_template(
        "forecast.html",
        title="Weather Forecast Service",
        forecast=result.short_description,
        feeling=result.feeling.value,
    )


@app.route("/api/forecast", methods=["GET"])
def api_forecast():
    """JSON variant of the form submission, reports the failed stage on errors"""
    latitude = request.args.get("latitude", "").strip()
    longitude = request.args.get("longitude", "").strip()

    if not latitude or not longitude:
        return jsonify(error="latitude and longitude are required"), 400

    try:
        result = run_pipeline(latitude, longitude)
    except ForecastError as e:
        app.logger.error(f"Forecast failed: {e}, for coordinates: {latitude},{longitude}")
        return jsonify(error=ERROR_NOTICE, stage=getattr(e, "stage", None)), 502

    return jsonify(result.to_dict())


@app.route("/health")
def health_check():
    """
    Health check endpoint for Kubernetes liveness and readiness probes.
    Returns 200 OK if the application is running properly.
    """
    return "OK", 200


if __name__ == "__main__":
    # Allow port customization via environment variable
    port = int(os.getenv("PORT", 8080))
    app.run(host="0.0.0.0", port=port)
