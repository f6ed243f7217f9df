import json
import os
import sys
from datetime import datetime

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# --- CONFIGURATION ---
BASE_URL = os.environ.get("GPA_TRACKER_URL", "http://localhost:5000")
TOKEN = os.environ.get("GPA_TRACKER_TOKEN", "")

# Calculate paths relative to this script file
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUT_DIR = os.path.join(BASE_DIR, "data")
# ---------------------


# --- SESSION SETUP ---
def create_retry_session(token):
    session = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=2,  # Wait 2s, 4s, 8s... on 429/5xx
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"]
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
    })
    return session


def get_profile(session):
    print(f"📡 Fetching profile from {BASE_URL}...")
    resp = session.get(f"{BASE_URL}/api/user/profile", timeout=15)
    resp.raise_for_status()
    return resp.json().get("user", {})


def get_courses(session):
    print("📡 Fetching courses...")
    resp = session.get(f"{BASE_URL}/api/gpa/courses", timeout=30)
    resp.raise_for_status()
    courses = resp.json().get("courses", [])
    print(f"✅ Found {len(courses)} courses.")
    return courses


def build_export(profile, courses):
    """Shape the API responses like an account export the grading package can read."""
    return {
        "user": {
            "firstName": profile.get("firstName", ""),
            "lastName": profile.get("lastName", ""),
            "email": profile.get("email", ""),
            "gpaScale": profile.get("gpaScale", "4.0"),
        },
        "courses": courses,
        "exportDate": datetime.now().isoformat(),
    }


def run():
    if not TOKEN:
        print("❌ Set GPA_TRACKER_TOKEN to an access token first.")
        return 1

    if not os.path.exists(OUTPUT_DIR):
        os.makedirs(OUTPUT_DIR)

    session = create_retry_session(TOKEN)
    try:
        export = build_export(get_profile(session), get_courses(session))
    except requests.RequestException as e:
        print(f"❌ Download failed: {e}")
        return 1

    filename = os.path.join(OUTPUT_DIR, f"export_{datetime.now():%Y%m%d_%H%M%S}.json")
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(export, f, indent=2)

    print(f"✨ Saved to '{filename}'")
    print("   Run: python -m grading --export " + os.path.basename(filename) + " summary")
    return 0


if __name__ == "__main__":
    sys.exit(run())
