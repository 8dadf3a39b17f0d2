"""Configure pytest for the project."""

import os
import sys
import tempfile

# Add the project root directory to Python path
project_root = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
sys.path.insert(0, project_root)

# Keep the JSON stores and local uploads out of the repository while testing
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="interview_prep_tests_"))
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-interview-prep-suite")
os.environ.setdefault("STORAGE_SERVICE", "local")
os.environ.setdefault("LLM_SERVICE", "gemini")
