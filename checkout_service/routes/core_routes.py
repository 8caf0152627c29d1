from flask import Blueprint

core = Blueprint("core", __name__)


@core.get("/")
def root():
    return "Stripe Backend is Running!", 200, {"Content-Type": "text/plain; charset=utf-8"}
