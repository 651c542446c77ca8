# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Local overrides go to config_local.py (gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name used in logs (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASK_TRACKER_LOG_TO_FILE": "Write full logs to <data_dir>/task_tracker.log (true/false).",
    # Paths
    "TASK_TRACKER_DATA_DIR": "Local data directory for logs (default: .local/task_tracker).",
    "TASK_TRACKER_TASKS_FILE": "JSON file holding all tasks (default: tasks.json).",
}
