#!/usr/bin/env python3
"""
FULL END-TO-END VALIDATION SCRIPT

Runs a complete flow: ADMIN creates STAFF/ADOPTER, ADOPTER submits a
request for an Available animal, STAFF schedules an interview, approves
and completes it. Validates the request is Completed and the animal Adopted.

Requires: backend running (e.g. python manage.py runserver), demo data
  (python manage.py seed_shelter) and an admin user (e.g. created via
  python manage.py createsuperuser with username "admin").
Usage: BASE_URL=http://localhost:8000 python backend/scripts/adoption_e2e_flow.py
"""

import os
import sys
import uuid

import requests

BASE_URL = os.environ.get("BASE_URL", "http://localhost:8000")
API = f"{BASE_URL}/api/v1"
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin123")


def log(msg):
    print(f"\n=== {msg} ===")


def assert_status(resp, expected):
    if resp.status_code != expected:
        print("FAILED:", resp.status_code, resp.text)
        sys.exit(1)


def login(username, password):
    resp = requests.post(
        f"{API}/auth/login",
        json={"username": username, "password": password},
        timeout=10,
    )
    assert_status(resp, 200)
    token = resp.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}


suffix = uuid.uuid4().hex[:6]

# -----------------------------
# STEP 0: LOGIN AS ADMIN
# -----------------------------
log("Login as ADMIN")
admin_headers = login("admin", ADMIN_PASSWORD)

# -----------------------------
# STEP 1: CREATE STAFF AND ADOPTER
# -----------------------------
log("Create STAFF and ADOPTER users")
for username, role in ((f"staff_{suffix}", "STAFF"), (f"adopter_{suffix}", "ADOPTER")):
    resp = requests.post(
        f"{API}/users",
        headers=admin_headers,
        json={
            "username": username,
            "password": "shelter123",
            "first_name": role.title(),
            "role": role,
        },
        timeout=10,
    )
    assert_status(resp, 201)

staff_headers = login(f"staff_{suffix}", "shelter123")
adopter_headers = login(f"adopter_{suffix}", "shelter123")

# -----------------------------
# STEP 2: PICK AN AVAILABLE ANIMAL
# -----------------------------
log("Find an Available animal")
resp = requests.get(
    f"{API}/animals",
    headers=adopter_headers,
    params={"status": "Available", "limit": 100},
    timeout=10,
)
assert_status(resp, 200)
candidates = resp.json()["results"]
animal_id = None
for animal in candidates:
    history = requests.get(
        f"{API}/adoptions/animal/{animal['id']}", headers=staff_headers, timeout=10
    ).json()["results"]
    if not any(r["status"] in ("Pending", "Interview Scheduled", "Approved") for r in history):
        animal_id = animal["id"]
        break
if animal_id is None:
    print("FAILED: No Available animal without an active request (run seed_shelter)")
    sys.exit(1)

# -----------------------------
# STEP 3: SUBMIT REQUEST
# -----------------------------
log(f"Submit adoption request for animal {animal_id}")
resp = requests.post(
    f"{API}/adoptions", headers=adopter_headers, json={"animal_id": animal_id}, timeout=10
)
assert_status(resp, 201)
request_id = resp.json()["data"]["id"]

# -----------------------------
# STEP 4: PROCESS THROUGH THE WORKFLOW
# -----------------------------
steps = [
    {"status": "Interview Scheduled", "interview_date": "2030-01-10T10:00"},
    {"status": "Approved", "comments": "Home check passed"},
    {"status": "Completed"},
]
for body in steps:
    log(f"Process request -> {body['status']}")
    resp = requests.put(
        f"{API}/adoptions/{request_id}/process",
        headers=staff_headers,
        json=body,
        timeout=10,
    )
    assert_status(resp, 200)

log("Backward transition is rejected")
resp = requests.put(
    f"{API}/adoptions/{request_id}/process",
    headers=staff_headers,
    json={"status": "Pending"},
    timeout=10,
)
assert_status(resp, 422)

# -----------------------------
# FINAL VALIDATION
# -----------------------------
log("Fetch final state")
final = requests.get(
    f"{API}/adoptions/{request_id}", headers=adopter_headers, timeout=10
)
assert_status(final, 200)
data = final.json()["data"]

if data["status"] != "Completed" or data["animal_status"] != "Adopted":
    print("FAILED: expected Completed/Adopted, got:", data["status"], data["animal_status"])
    sys.exit(1)

log("ADOPTION E2E VALIDATION PASSED")
