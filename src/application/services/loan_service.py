"""Loan service - orchestrates the loan quote use case."""

from datetime import date
from typing import Callable

import structlog

from src.application.dto import LoanQuoteRequestDTO, LoanQuoteResponse
from src.application.services.reputation_service import ReputationService
from src.domain.entities import LoanQuote
from src.domain.exceptions import (
    AmountExceedsCreditException,
    InvalidLoanQuoteRequestException,
    MerchantInactiveException,
    MerchantNotFoundException,
)
from src.domain.interfaces import MerchantRepository
from src.service.scoring import build_quote

logger = structlog.get_logger(__name__)


class LoanService:
    """
    Application service for loan quote use cases.

    Quotes are off-chain arithmetic only; nothing is persisted and no loan
    is opened on the ledger.
    """

    def __init__(
        self,
        reputation_service: ReputationService,
        merchant_repository: MerchantRepository,
        today: Callable[[], date] = date.today,
    ):
        self._reputation_service = reputation_service
        self._merchant_repo = merchant_repository
        self._today = today

    async def calculate_loan_quote(
        self,
        wallet: str,
        request: LoanQuoteRequestDTO,
    ) -> LoanQuoteResponse:
        """
        Calculate a loan quote for a borrower.

        Args:
            wallet: Stellar wallet address of the borrower
            request: Purchase amount, merchant and term

        Returns:
            LoanQuoteResponse with the breakdown and repayment schedule

        Raises:
            InvalidLoanQuoteRequestException: If request validation fails
            OracleUnavailableException: If no reputation score can be read
            MerchantNotFoundException: If the merchant does not exist
            MerchantInactiveException: If the merchant is not accepting loans
            AmountExceedsCreditException: If the amount is above the tier limit
        """
        errors = request.validate()
        if errors:
            raise InvalidLoanQuoteRequestException("; ".join(errors))

        log = logger.bind(
            wallet=wallet,
            merchant_id=str(request.merchant_id),
            amount=str(request.amount),
            term=request.term,
        )
        log.info("loan_quote_requested")

        # 1. Reputation drives the rate and the credit ceiling
        reputation = await self._reputation_service.get_reputation_data(wallet)

        # 2. Merchant must exist and be active
        await self._validate_merchant(str(request.merchant_id))

        # 3. Amount must fit the tier's credit ceiling
        if request.amount > reputation.max_credit:
            log.info(
                "loan_quote_exceeds_credit",
                tier=reputation.tier.value,
                max_credit=str(reputation.max_credit),
            )
            raise AmountExceedsCreditException(request.amount, reputation.max_credit)

        # 4-5. Breakdown and schedule
        quote: LoanQuote = build_quote(
            amount=request.amount,
            interest_rate=reputation.interest_rate,
            term=request.term,
            start=self._today(),
        )

        log.info(
            "loan_quote_calculated",
            tier=reputation.tier.value,
            interest_rate=str(quote.interest_rate),
            total_repayment=str(quote.total_repayment),
        )

        return LoanQuoteResponse.from_entity(quote)

    async def _validate_merchant(self, merchant_id: str) -> None:
        merchant = await self._merchant_repo.get_by_id(merchant_id)

        if merchant is None:
            logger.warning("merchant_not_found", merchant_id=merchant_id)
            raise MerchantNotFoundException(merchant_id)

        if not merchant.is_active:
            logger.warning("merchant_inactive", merchant_id=merchant_id)
            raise MerchantInactiveException(merchant_id, merchant.name)
