"""Account balance, invoices, payrows, transactions and wallets.

Every balance endpoint answers with a schemaless payload wrapped in
:class:`~shipit_client.models.BalanceResponse`.
"""

from typing import Any

from shipit_client.endpoints.base import RawBodyRequest, Request, segment
from shipit_client.models import BalanceResponse


class BalanceLookupRequest(Request):
    """GET below ``/v1/balance`` addressed by zero or more identifiers."""

    method = "GET"
    response_model = BalanceResponse

    def __init__(self, *ids: str):
        self.ids = ids


class BalanceQueryRequest(RawBodyRequest):
    """POST below ``/v1/balance`` carrying a filter body."""

    method = "POST"
    response_model = BalanceResponse


class GetCarrierReportsRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        return "/v1/balance/carrier-reports"


class GetBalanceCarriersRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        return "/v1/balance/carriers"


class GetBalanceRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (balance_id,) = self.ids
        return "/v1/balance/" + segment(balance_id)


class GetInvoicePayrowsRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        balance_id, invoice = self.ids
        return "/v1/balance/" + segment(balance_id) + "/invoice/" + segment(invoice)


class GetInvoiceRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (invoice,) = self.ids
        return "/v1/balance/invoice/" + segment(invoice)


class GetAllPayrowsRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (invoice,) = self.ids
        return "/v1/balance/invoice/" + segment(invoice) + "/payrows"


class GetPayrowRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (payrow,) = self.ids
        return "/v1/balance/payrow/" + segment(payrow)


class GetTransactionRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (transaction,) = self.ids
        return "/v1/balance/transaction/" + segment(transaction)


class GetBalanceUserRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (user_id,) = self.ids
        return "/v1/balance/user/" + segment(user_id)


class GetPendingInvoicesRequest(BalanceLookupRequest):
    def endpoint(self) -> str:
        (business_entity_id,) = self.ids
        return "/v1/balance/pending-invoices/" + segment(business_entity_id)


class QueryInvoicesRequest(BalanceQueryRequest):
    def endpoint(self) -> str:
        return "/v1/balance/invoices"


class InvoiceBookingDataRequest(BalanceQueryRequest):
    def __init__(self, invoice: str, data: dict[str, Any]):
        super().__init__(data)
        self.invoice = invoice

    def endpoint(self) -> str:
        return "/v1/balance/invoice/" + segment(self.invoice) + "/booking-data"


class QueryPayrowsRequest(BalanceQueryRequest):
    def endpoint(self) -> str:
        return "/v1/balance/payrows"


class QueryTransactionsRequest(BalanceQueryRequest):
    def endpoint(self) -> str:
        return "/v1/balance/transactions"


class QueryWalletsRequest(BalanceQueryRequest):
    def endpoint(self) -> str:
        return "/v1/balance/wallets"


class QueryBalanceShipmentsRequest(BalanceQueryRequest):
    def endpoint(self) -> str:
        return "/v1/balance/shipments"
