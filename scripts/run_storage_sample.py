#!/usr/bin/env python3
"""Standalone script for running the storage account walkthrough.

Usage:
    python scripts/run_storage_sample.py [--yes | --keep] [--json | --markdown] [--verbose]

Environment Variables:
    AZURE_TENANT_ID         Azure AD tenant ID or domain
    AZURE_CLIENT_ID         Application (client) ID of the service principal
    AZURE_CLIENT_SECRET     Client secret of the service principal
    AZURE_SUBSCRIPTION_ID   Subscription to create the resources in
"""

import sys

# Add the parent directory to the path for imports
sys.path.insert(0, str(__file__).rsplit("/", 2)[0])

from storage_sample.cli import main

if __name__ == "__main__":
    sys.exit(main())
