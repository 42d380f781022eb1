"""
API Services - glue between routers and the invoice_dashboard package
"""
