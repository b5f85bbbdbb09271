"""
Configuration
Environment variables, collection names and the literal targets of each maintenance script
"""
import os
from dotenv import load_dotenv

load_dotenv()

# === Environment variables ===
ENV_CREDENTIALS_JSON = "GOOGLE_APPLICATION_CREDENTIALS_JSON"
ENV_CREDENTIALS_PATH = "GOOGLE_APPLICATION_CREDENTIALS"
ENV_PROJECT = "GOOGLE_CLOUD_PROJECT"
DRY_RUN = bool(os.getenv("DRY_RUN"))

# === Firestore collection names ===
COL_MEMBERS = "members"
COL_PAYMENTS = "payments"
COL_GYM_ENTRIES = "gymEntries"
COL_PROGRESS = "progress"
COL_PRICING = "pricing"
COL_USERS = "users"
COL_ATTENDANCE = "attendance"
COL_NICKNAMES = "nicknames"

SMOKE_TEST_COLLECTIONS = [COL_MEMBERS, COL_PAYMENTS, COL_GYM_ENTRIES, COL_PROGRESS]
CLEAR_DEFAULT_COLLECTIONS = [
    COL_MEMBERS,
    COL_PAYMENTS,
    COL_GYM_ENTRIES,
    COL_PROGRESS,
    COL_ATTENDANCE,
    COL_PRICING,
    COL_NICKNAMES,
]

# === Limits ===
SAMPLE_LIMIT = 5
TRUNCATE_LENGTH = 200
CLEAR_BATCH_SIZE = 500

# === Users ===
BCRYPT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72
DEFAULT_ROLE = "staff"

# === Pricing name fields (tried in order) ===
# Historical writers used Particulars, particulars, name or title for the product label
NAME_QUERY_FIELDS = ("Particulars", "name")
NAME_MATCH_FIELDS = ("Particulars", "particulars", "name")
NAME_LABEL_FIELDS = ("name", "Particulars", "title")

# === Script targets ===
DELETE_PRICING_IDS = ["monthly_gym", "coach_session", "gym_month"]
DELETE_PRICING_NAMES = ["Monthly Gym Membership", "Coach Session"]
DELETE_OLD_DAILY_IDS = ["daily_gym", "daily_gym_peak", "daily_gym_offpeak"]

DAILY_COACH_ID = "daily_coach"
DAILY_COACH_UPDATE = {
    "time_window": "daily",
    "notes": "Available only if member has no active Coach Subscription and during 15:00-21:59 Manila time",
}

RENAME_OLD_NAME = "Coach Session Only"
RENAME_NEW_NAME = "Daily Coach Only"

# Pricing seed file, first existing path wins
PRICING_SEED_PATHS = [os.path.join("dist", "pricing.json"), os.path.join("public", "pricing.json")]

# === Payments ===
PAYMENT_SCAN_LIMIT = 2000
PAYMENT_SNIPPET_KEYS = 10
