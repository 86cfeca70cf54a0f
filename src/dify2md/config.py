"""Central configuration for labels and export layout."""

import os

# Speaker labels — override with DIFY2MD_USER_LABEL / DIFY2MD_AI_LABEL env vars
DEFAULT_USER_LABEL = os.environ.get("DIFY2MD_USER_LABEL", "User")
DEFAULT_AI_LABEL = os.environ.get("DIFY2MD_AI_LABEL", "AI")

# Transcript heading
DEFAULT_TITLE = os.environ.get("DIFY2MD_TITLE", "Chat History")

# Top-level field of the export holding the message array
MESSAGES_FIELD = "data"
