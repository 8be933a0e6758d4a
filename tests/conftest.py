import os
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Settings are read at import time; pin them before any test module imports the app.
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ["ANALYTICS_ENABLED"] = "0"
os.environ["SUPABASE_URL"] = "https://project.supabase.co"
os.environ["RESUMES_BUCKET"] = "resumes"
os.environ["PDF_EXTRACTOR"] = "pypdf"
os.environ["AI_PROVIDER"] = "openai"
os.environ["TEMP_DIR"] = tempfile.gettempdir()
os.environ.pop("SENTRY_DSN", None)
