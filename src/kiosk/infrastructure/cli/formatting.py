"""Display text for the kiosk.

Pure functions only: values in, strings out.  Nothing here prints.
"""

from __future__ import annotations

from kiosk.application.dto import ReceiptDTO, StockLineDTO
from kiosk.domain.model.product import OUT_OF_STOCK

WELCOME = "안녕하세요. W편의점입니다.\n현재 보유하고 있는 상품입니다.\n"
ORDER_PROMPT = "구매하실 상품명과 수량을 입력해 주세요. (예: [사이다-2],[감자칩-1])"
MEMBERSHIP_PROMPT = "멤버십 할인을 받으시겠습니까? (Y/N)"
AGAIN_PROMPT = "감사합니다. 구매하고 싶은 다른 상품이 있나요? (Y/N)"


def format_error(message: str) -> str:
    return f"[ERROR] {message}"


def format_stock_line(line: StockLineDTO) -> str:
    quantity = f"{line.quantity}개" if line.quantity > 0 else OUT_OF_STOCK
    text = f"- {line.product_name} {line.price}원 {quantity}"
    if line.promotion:
        text += f" {line.promotion}"
    return text


def format_stock(lines: list[StockLineDTO]) -> str:
    return WELCOME + "\n" + "\n".join(format_stock_line(line) for line in lines)


def free_unit_prompt(product_name: str, quantity: int) -> str:
    return (
        f"현재 {product_name}은(는) {quantity}개를 무료로 더 받을 수 있습니다. "
        "추가하시겠습니까? (Y/N)"
    )


def shortage_prompt(product_name: str, quantity: int) -> str:
    return (
        f"현재 {product_name} {quantity}개는 프로모션 할인이 적용되지 않습니다. "
        "그래도 구매하시겠습니까? (Y/N)"
    )


def format_receipt(dto: ReceiptDTO) -> str:
    lines = [
        f"{'=' * 14}W 편의점{'=' * 16}",
        f"{'상품명':<14}{'수량':>6}{'금액':>12}",
    ]
    for item in dto.items:
        lines.append(f"{item.product_name:<14}{item.quantity:>6}{item.line_total:>12}")

    lines.append(f"{'=' * 13}증  정{'=' * 15}")
    for gift in dto.gifts:
        lines.append(f"{gift.product_name:<14}{gift.quantity:>6}")

    lines.append("=" * 36)
    lines.append(f"{'총구매액':<14}{dto.total_quantity:>6}{dto.total_price:>12}")
    lines.append(f"{'행사할인':<14}{'':>6}{'-' + dto.event_discount:>12}")
    lines.append(f"{'멤버십할인':<14}{'':>6}{'-' + dto.membership_discount:>12}")
    lines.append(f"{'내실돈':<14}{'':>6}{dto.final_price:>12}")
    return "\n".join(lines)
