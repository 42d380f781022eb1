"""
API Schemas - Pydantic models for request/response validation

These schemas define the contract between the dashboard API and its clients.
Backend payload shapes live in invoice_dashboard.definitions.
"""
