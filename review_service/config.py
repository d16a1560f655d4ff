import os

REQUIRED_SETTINGS = ("SANITY_WEBHOOK_SECRET",)

DEFAULTS = {
    "SANITY_WEBHOOK_SECRET": "",
    "SANITY_PROJECT_ID": "",
    "SANITY_DATASET": "production",
    "SANITY_API_VERSION": "2021-10-21",
    "SANITY_API_TOKEN": "",
    "SANITY_USE_CDN": "false",
    "TWILIO_ACCOUNT_SID": "",
    "TWILIO_AUTH_TOKEN": "",
    "TWILIO_VERIFY_SERVICE_SID": "",
    "VERIFICATION_CHANNEL": "email",
    "VERIFICATION_RECIPIENT_FORMAT": "{username}@gatech.edu",
    "REVALIDATE_URL": "",
    "REVALIDATE_TOKEN": "",
    "SENTRY_DSN": "",
    "HTTP_TIMEOUT": "10",
    "LOG_LEVEL": "INFO",
}


def load_config(environ=None):
    """Read every known setting from the environment, falling back to defaults."""
    environ = os.environ if environ is None else environ
    config = {key: environ.get(key, default) for key, default in DEFAULTS.items()}

    config["SANITY_USE_CDN"] = str(config["SANITY_USE_CDN"]).lower() in ("1", "true", "yes")
    config["HTTP_TIMEOUT"] = float(config["HTTP_TIMEOUT"])
    return config


def missing_settings(config):
    """Return the names of required settings that are absent or empty."""
    return [key for key in REQUIRED_SETTINGS if not config.get(key)]
