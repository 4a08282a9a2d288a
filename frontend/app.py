import requests
import streamlit as st

from booking_client import (
    error_detail,
    get_bookings,
    get_summary,
    post_booking,
    post_cancel,
)

st.set_page_config(page_title="Travel Bookings", layout="wide")
st.title("Travel Booking Registry")
st.caption("Backend: FastAPI | UI: Streamlit | In-memory bookings")

with st.sidebar.form("booking_form"):
    st.subheader("New booking")
    name = st.text_input("Traveler name", value="John Doe")
    origin = st.text_input("From", value="New York")
    destination = st.text_input("To", value="London")
    meal = st.text_input("Meal preference (optional)", value="")
    submitted = st.form_submit_button("Book")

if submitted:
    payload = {
        "name": name,
        "route": [origin, destination],
        "meal_preference": meal or None,
    }
    try:
        booking = post_booking(payload)
        st.success(f"Booking {booking['id']} created")
    except requests.HTTPError as exc:
        st.error(f"Booking failed: {error_detail(exc)}")
    except requests.RequestException as exc:
        st.error(f"Backend unreachable: {exc}")

try:
    summary = get_summary()
    listing = get_bookings()
except requests.RequestException as exc:
    st.error(f"Backend unreachable: {exc}")
    st.stop()

cols = st.columns(4)
cols[0].metric("Total", summary["total"])
for col, status in zip(cols[1:], ["booked", "cancelled", "pending"]):
    col.metric(status.title(), summary["by_status"].get(status, 0))

st.subheader("Bookings")
for lookup in listing["bookings"]:
    record = lookup["booking"]
    origin, destination = record["route"]
    row = st.columns([5, 1])
    row[0].markdown(
        f"**#{record['id']} {record['name']}** | {origin} → {destination} | "
        f"{record['travel_type']} | status: {record['status']} | "
        f"meal: {record['meal_preference'] or 'Not specified'}"
    )
    if record["status"] != "cancelled" and row[1].button("Cancel", key=f"cancel-{record['id']}"):
        try:
            post_cancel(record["id"])
        except requests.RequestException as exc:
            st.error(f"Cancel failed: {exc}")
        else:
            st.rerun()
