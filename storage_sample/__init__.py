"""Azure Storage Account Sample.

Walks through provisioning, inspecting and deleting an Azure storage
account and its resource group with the Azure SDK management clients.
"""

__version__ = "0.1.0"
