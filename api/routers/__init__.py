"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- customers, invoices: pass-through route handlers to the backend API
- dashboard: view-models for the signed-in dashboard pages
- invoice_actions: invoice create/update/delete form actions
- auth: sign-in, sign-up, sign-out and session
- health: Health checks
"""
