import os

import requests

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")


def post_booking(payload: dict) -> dict:
    resp = requests.post(f"{BACKEND_URL}/bookings", json=payload, timeout=10)
    resp.raise_for_status()
    return resp.json()


def get_bookings() -> dict:
    resp = requests.get(f"{BACKEND_URL}/bookings", timeout=10)
    resp.raise_for_status()
    return resp.json()


def get_summary() -> dict:
    resp = requests.get(f"{BACKEND_URL}/bookings/summary", timeout=10)
    resp.raise_for_status()
    return resp.json()


def post_cancel(booking_id: int) -> dict:
    resp = requests.post(f"{BACKEND_URL}/bookings/{booking_id}/cancel", timeout=10)
    resp.raise_for_status()
    return resp.json()


def error_detail(exc: requests.HTTPError) -> str:
    """Best-effort message from an error response, JSON or not."""
    if exc.response is None:
        return str(exc)
    try:
        return exc.response.json().get("detail", str(exc))
    except ValueError:
        return exc.response.text or str(exc)
