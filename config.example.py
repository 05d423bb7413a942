# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACK_APP_NAME": "App display name (default: tasktrack).",
    "TASKTRACK_LOG_LEVEL": "Console logging level (default: INFO).",
    # Console
    "TASKTRACK_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    "TASKTRACK_PRINCIPAL": "Caller identity the console starts as (default: $USER, else anonymous).",
    # Paths (gitignored)
    "TASKTRACK_DATA_DIR": "Local data directory (default: .local/tasktrack).",
    "TASKTRACK_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Store identity
    "TASKTRACK_STORE_NAME": "Name of the task map inside the SQLite file (default: tasks).",
    "TASKTRACK_STORE_VERSION": "Version of the task map; bumping it starts an empty map (default: 0).",
    "TASKTRACK_MAX_KEY_SIZE": "Max task id length in UTF-8 bytes (default: 44).",
    # Pagination
    "TASKTRACK_INITIAL_LOAD_SIZE": "How many tasks getInitialTasks returns (default: 4).",
}
