"""CLI commands for the store counter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click

from kiosk.application.apply_membership import ApplyMembershipHandler
from kiosk.application.checkout import CheckoutHandler
from kiosk.application.claim_free_unit import ClaimFreeUnitHandler
from kiosk.application.confirm_shortage import ConfirmShortageHandler
from kiosk.application.place_order import PlaceOrderHandler
from kiosk.application.show_stock import ShowStockHandler
from kiosk.application.start_purchase import StartPurchaseHandler
from kiosk.domain.exceptions import CatalogIntegrityError, DomainException
from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.infrastructure.bootstrap import promotion_repository, session_repository
from kiosk.infrastructure.cli.formatting import (
    AGAIN_PROMPT,
    MEMBERSHIP_PROMPT,
    ORDER_PROMPT,
    format_error,
    format_receipt,
    format_stock,
    free_unit_prompt,
    shortage_prompt,
)

T = TypeVar("T")


def _open_session(data_dir: Path) -> SessionRepository:
    try:
        return session_repository(data_dir)
    except CatalogIntegrityError as exc:
        raise click.ClickException(f"Catalog error: {exc}")


def _ask(message: str, action: Callable[[str], T]) -> T:
    """Prompt until ``action`` accepts the answer."""
    while True:
        raw = click.prompt(message, default="", show_default=False, prompt_suffix="\n")
        try:
            return action(raw)
        except DomainException as exc:
            click.echo(format_error(str(exc)))


@click.command("stock")
@click.pass_obj
def stock(data_dir: Path) -> None:
    """Show the products currently on the shelves."""
    session = _open_session(data_dir)
    click.echo(format_stock(ShowStockHandler(session).handle()))


@click.command("shop")
@click.pass_obj
def shop(data_dir: Path) -> None:
    """Serve customers interactively until nobody wants to buy more."""
    session = _open_session(data_dir)
    place_order = PlaceOrderHandler(session, promotion_repository(data_dir))
    claim_free_unit = ClaimFreeUnitHandler(session)
    confirm_shortage = ConfirmShortageHandler(session)
    apply_membership = ApplyMembershipHandler(session)
    checkout_handler = CheckoutHandler(session)
    start_purchase = StartPurchaseHandler(session)

    try:
        while True:
            click.echo(format_stock(ShowStockHandler(session).handle()))
            click.echo()
            pending = _ask(ORDER_PROMPT, place_order.handle)

            for offer in pending.free_unit_offers:
                _ask(
                    free_unit_prompt(offer.product_name, offer.quantity),
                    lambda answer: claim_free_unit.handle(offer.product_name, answer),
                )
            for shortage in pending.shortages:
                _ask(
                    shortage_prompt(shortage.product_name, shortage.quantity),
                    lambda answer: confirm_shortage.handle(shortage.product_name, answer),
                )
            _ask(MEMBERSHIP_PROMPT, apply_membership.handle)

            click.echo(format_receipt(checkout_handler.handle()))
            click.echo()
            if not _ask(AGAIN_PROMPT, start_purchase.handle):
                break
    except CatalogIntegrityError as exc:
        raise click.ClickException(f"Catalog error: {exc}")


@click.command("checkout")
@click.option("--items", required=True, help="Order as '[name-qty],[name-qty]'.")
@click.option("--accept-free/--decline-free", default=False, help="Take offered free units.")
@click.option(
    "--accept-shortage/--decline-shortage",
    default=True,
    help="Pay the regular price for units promotional stock cannot cover.",
)
@click.option("--membership/--no-membership", default=False, help="Apply the membership discount.")
@click.pass_obj
def checkout(
    data_dir: Path,
    items: str,
    accept_free: bool,
    accept_shortage: bool,
    membership: bool,
) -> None:
    """Ring up a single order and print its receipt."""
    session = _open_session(data_dir)
    place_order = PlaceOrderHandler(session, promotion_repository(data_dir))

    try:
        pending = place_order.handle(items)
        for offer in pending.free_unit_offers:
            ClaimFreeUnitHandler(session).handle(offer.product_name, _yes_no(accept_free))
        for shortage in pending.shortages:
            ConfirmShortageHandler(session).handle(shortage.product_name, _yes_no(accept_shortage))
        ApplyMembershipHandler(session).handle(_yes_no(membership))
        receipt = CheckoutHandler(session).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CatalogIntegrityError as exc:
        raise click.ClickException(f"Catalog error: {exc}")

    click.echo(format_receipt(receipt))


def _yes_no(flag: bool) -> str:
    return "Y" if flag else "N"
