from concurrent.futures import ThreadPoolExecutor

from invoice_dashboard.adapters.backend import BackendAPI
from invoice_dashboard.data._errors import fetch_errors
from invoice_dashboard.definitions import CardData, InvoiceStatusTotals
from invoice_dashboard.utils.formatting import format_currency


def fetch_card_data(backend: BackendAPI) -> CardData:
    """
    Summary cards for the dashboard overview.

    The invoice count, customer count and status totals are independent
    queries and run in parallel. If any of them fails, all cards fall back
    to their zero defaults.
    """
    cards = CardData()
    with fetch_errors("Failed to fetch card data"):
        with ThreadPoolExecutor(max_workers=3) as executor:
            invoice_count = executor.submit(backend.count_invoices)
            customer_count = executor.submit(backend.count_customers)
            status_totals = executor.submit(backend.invoice_status_totals)
            # .result() re-raises the worker's exception here
            number_of_invoices = int(invoice_count.result() or 0)
            number_of_customers = int(customer_count.result() or 0)
            totals = InvoiceStatusTotals.model_validate(status_totals.result() or {})

        cards = CardData(
            number_of_customers=number_of_customers,
            number_of_invoices=number_of_invoices,
            total_paid_invoices=format_currency(totals.paid or 0),
            total_pending_invoices=format_currency(totals.pending or 0),
        )
    return cards
