"""
Nox configuration for SprintQA project

Unified development command entry point - simplified version
using existing environment
"""

import nox

# Disable virtual environment, use current environment
nox.options.sessions = ["tests", "format"]

TEST_ENV = {"DJANGO_SETTINGS_MODULE": "core.settings"}


@nox.session(venv_backend="none")
def tests(session):
    """
    Run all tests
    """
    session.log("🧪 Running all tests")

    session.run(
        "python", "-m", "pytest",
        "sprintqa/qaboard/tests/",
        "-v",
        env=TEST_ENV
    )


@nox.session(venv_backend="none")
def unit_tests(session):
    """
    Run unit tests
    """
    session.log("🧪 Running unit tests")

    session.run(
        "python", "-m", "pytest",
        "sprintqa/qaboard/tests/unit/",
        "-v",
        env=TEST_ENV
    )


@nox.session(venv_backend="none")
def api_tests(session):
    """
    Run API tests
    """
    session.log("🧪 Running API tests")

    session.run(
        "python", "-m", "pytest",
        "sprintqa/qaboard/tests/api/",
        "-v",
        env=TEST_ENV
    )


@nox.session(venv_backend="none")
def format(session):
    """
    Auto format code
    """
    session.log("🔧 Auto formatting code")

    try:
        session.run("black", "sprintqa/")
        session.run("isort", "sprintqa/")
        session.log("✅ Code formatting completed")
    except Exception as e:
        session.log(f"⚠️  Formatting failed: {e}")
        session.log("Please ensure installed: pip install black isort")


@nox.session(venv_backend="none")
def django_check(session):
    """
    Django system check
    """
    session.log("🔍 Running Django system check")

    session.run("python", "sprintqa/manage.py", "check", env=TEST_ENV)


@nox.session(venv_backend="none")
def runserver(session):
    """
    Start development server
    """
    port = session.posargs[0] if session.posargs else "3000"
    session.log(f"🚀 Starting development server (port: {port})")

    session.run(
        "python", "sprintqa/manage.py", "runserver", f"0.0.0.0:{port}",
        env=TEST_ENV
    )
