import os
import streamlit as st
import requests

from page_markup import details_html, slot_html

# Page configuration
st.set_page_config(
    page_title="Weather Lookup",
    page_icon="🌤️",
    layout="centered",
    initial_sidebar_state="expanded"
)

# Custom CSS for better UI
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #1E88E5;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }
    .city-name {
        font-size: 1.8rem;
        font-weight: bold;
    }
    .temperature {
        font-size: 3rem;
        color: #1E88E5;
    }
    .details {
        padding: 0.75rem 1rem;
        border-radius: 0.5rem;
        border-left: 4px solid #43A047;
    }
    .success-box {
        padding: 1rem;
        background-color: #207a27;
        border-radius: 0.5rem;
        border-left: 4px solid #43A047;
        margin: 1rem 0;
    }
</style>
""", unsafe_allow_html=True)

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

# Initialize session state
if "snapshot" not in st.session_state:
    st.session_state.snapshot = None

if "location_requested" not in st.session_state:
    st.session_state.location_requested = False

def call_backend(path: str, params: dict = None) -> dict:
    """Call the backend and return its surface snapshot, or an error dict."""
    try:
        response = requests.get(f"{BACKEND_URL}{path}", params=params, timeout=15)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.ConnectionError:
        return {
            "error_message": "Cannot connect to backend. Make sure the backend is running on port 8000."
        }
    except requests.exceptions.Timeout:
        return {
            "error_message": "Request timed out. Please try again."
        }
    except requests.exceptions.RequestException as e:
        return {
            "error_message": f"An error occurred: {str(e)}"
        }

def check_backend_health() -> bool:
    """Check if backend is running."""
    try:
        response = requests.get(f"{BACKEND_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False

def merge_snapshot(snapshot: dict):
    """
    A location lookup that found nothing comes back idle; keep whatever
    is already on screen instead of blanking it.
    """
    if snapshot.get("state") == "idle":
        return
    st.session_state.snapshot = snapshot

def display_snapshot(snapshot: dict):
    """Paint the snapshot into the page slots."""
    if snapshot.get("error_message"):
        st.error(snapshot["error_message"])
    if snapshot.get("alert"):
        st.warning(snapshot["alert"])
    if snapshot.get("state") != "rendered" and not snapshot.get("city"):
        return

    left, right = st.columns([3, 1])
    with left:
        st.markdown(slot_html("city-name", snapshot.get("city")), unsafe_allow_html=True)
        st.markdown(slot_html("temperature", snapshot.get("temperature")), unsafe_allow_html=True)
        if snapshot.get("description"):
            st.write(snapshot["description"])
    with right:
        # Hidden rather than a broken image when the report has no icon
        if snapshot.get("icon_visible") and snapshot.get("icon_url"):
            st.image(snapshot["icon_url"], caption=snapshot.get("icon_alt"))

    if snapshot.get("details"):
        st.markdown(details_html(snapshot["details"]), unsafe_allow_html=True)

# Header
st.markdown('<div class="main-header">🌤️ Weather Lookup</div>', unsafe_allow_html=True)
st.markdown("<p style='text-align: center; color: #666;'>Current conditions for any city, or for where you are</p>", unsafe_allow_html=True)

# Sidebar
with st.sidebar:
    st.header("⚙️ Settings")

    backend_status = check_backend_health()
    if backend_status:
        st.markdown('<div class="success-box">✅ Backend Connected</div>', unsafe_allow_html=True)
    else:
        st.markdown('<div class="info-box">⚠️ Backend Disconnected<br><small>Run: <code>python run.py</code> in backend folder</small></div>', unsafe_allow_html=True)

    st.divider()

    if st.button("📍 Use my location", use_container_width=True):
        with st.spinner("Locating..."):
            merge_snapshot(call_backend("/weather/location"))

if not backend_status:
    st.warning("⚠️ Backend is not running. Please start the backend server first.")
    st.code("cd backend && python run.py", language="bash")
else:
    # Load weather for the user's location once per session
    if not st.session_state.location_requested:
        st.session_state.location_requested = True
        with st.spinner("Locating..."):
            merge_snapshot(call_backend("/weather/location"))

    with st.form("search-form"):
        city = st.text_input("City", placeholder="e.g. London")
        submitted = st.form_submit_button("Search")

    if submitted:
        with st.spinner("Fetching weather..."):
            st.session_state.snapshot = call_backend("/weather/search", {"city": city})

    if st.session_state.snapshot:
        display_snapshot(st.session_state.snapshot)

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Powered by FastAPI & OpenWeatherMap | Made with ❤️ using Streamlit</small>
</div>
""", unsafe_allow_html=True)
