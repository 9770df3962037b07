"""JSON endpoints for debts, payments and payoff previews."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from ...logging_config import get_logger
from ...models.debt import Debt
from ...services.due_dates import next_due_date
from ...services.estimates import calculate_due_totals, estimated_year_total
from ...services.payments import log_payment
from ...services.planner import Strategy, compare_strategies, simulate_strategy
from . import bp

logger = get_logger(__name__)


def _number(name: str, value: Any) -> float:
    """Coerce ``value`` to a finite float or raise ``ValueError``."""

    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number")
    return number


def _flag(name: str, value: Any) -> bool:
    # JSON true/false only; strings such as "false" are rejected.
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false")
    return value


def _text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value.strip()


_PREFERENCE_FIELDS = {
    "week_start": _text,
    "currency": _text,
    "theme": _text,
    "show_next_month_preview": _flag,
    "strategy": _text,
    "extra_cash": _number,
}


def _state() -> dict[str, Any]:
    return current_app.extensions["debtcycle"]


def _float_arg(name: str, default: float) -> float:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    return _number(name, raw)


def _date_arg(name: str) -> date:
    raw = request.args.get(name)
    if not raw:
        return date.today()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ValueError(f"{name} must be an ISO date (YYYY-MM-DD)") from None


def _json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def _debt_from_payload(payload: dict[str, Any]) -> Debt:
    name = str(payload.get("name") or "").strip()
    if not name:
        raise ValueError("name is required")
    balance = _number("balance", payload.get("balance", 0.0))
    monthly_payment = _number("monthly_payment", payload.get("monthly_payment", 0.0))
    apr = _number("apr", payload.get("apr", 0.0))
    try:
        due_day = int(payload.get("due_day", 1))
    except (TypeError, ValueError, OverflowError):
        raise ValueError("due_day must be a whole number") from None
    if balance < 0 or monthly_payment < 0 or apr < 0:
        raise ValueError("balance, monthly_payment and apr must be non-negative")
    if not 1 <= due_day <= 31:
        raise ValueError("due_day must be between 1 and 31")

    return Debt(
        name=name,
        balance=balance,
        monthly_payment=monthly_payment,
        apr=apr,
        due_day=due_day,
        active=_flag("active", payload.get("active", True)),
        autopay=_flag("autopay", payload.get("autopay", False)),
        next_due_date=next_due_date(due_day, date.today()),
    )


@bp.errorhandler(ValueError)
def _bad_request(exc: ValueError):
    return jsonify({"ok": False, "error": str(exc)}), 400


@bp.errorhandler(LookupError)
def _not_found(exc: LookupError):
    return jsonify({"ok": False, "error": str(exc.args[0]) if exc.args else "Not found"}), 404


@bp.get("/db/health")
def db_health():
    """Cheap database round-trip used by uptime checks."""

    try:
        count = _state()["debts"].count()
    except SQLAlchemyError as exc:
        logger.exception("Database health check failed")
        return jsonify({"ok": False, "error": str(exc)}), 500
    return jsonify({"ok": True, "debtsCount": count})


@bp.get("/debts")
def list_debts():
    return jsonify([debt.to_dict() for debt in _state()["debts"].list_all()])


@bp.post("/debts")
def create_debt():
    debt = _state()["debts"].create(_debt_from_payload(_json_body()))
    logger.info("Debt created", extra={"debt_id": debt.id})
    return jsonify(debt.to_dict()), 201


@bp.post("/debts/<int:debt_id>/payments")
def create_payment(debt_id: int):
    payload = _json_body()
    amount = _number("amount", payload.get("amount"))
    paid_on = None
    if payload.get("paid_on") is not None:
        try:
            paid_on = datetime.fromisoformat(_text("paid_on", payload["paid_on"]))
        except ValueError:
            raise ValueError("paid_on must be an ISO date-time string") from None

    state = _state()
    debt, payment = log_payment(
        debt_repository=state["debts"],
        payment_repository=state["payments"],
        debt_id=debt_id,
        amount=amount,
        paid_on=paid_on,
        count_toward_cycle=_flag("count_toward_cycle", payload.get("count_toward_cycle", True)),
    )
    return jsonify({"debt": debt.to_dict(), "payment": payment.to_dict()}), 201


@bp.get("/preferences")
def get_preferences():
    return jsonify(_state()["preferences"].get().to_dict())


@bp.put("/preferences")
def update_preferences():
    payload = _json_body()
    repository = _state()["preferences"]
    preferences = repository.get()
    for field_name, parse in _PREFERENCE_FIELDS.items():
        if field_name in payload:
            setattr(preferences, field_name, parse(field_name, payload[field_name]))

    Strategy.parse(preferences.strategy)
    if preferences.week_start not in {"mon", "sun"}:
        raise ValueError("week_start must be 'mon' or 'sun'")
    if preferences.theme not in {"dark", "light"}:
        raise ValueError("theme must be 'dark' or 'light'")
    if not preferences.currency:
        raise ValueError("currency must not be empty")
    if preferences.extra_cash < 0:
        raise ValueError("extra_cash must be non-negative")
    return jsonify(repository.save(preferences).to_dict())


@bp.get("/simulation")
def simulation():
    """Preview the payoff plan for one strategy.

    Query parameters default to the stored preferences.
    """

    state = _state()
    preferences = state["preferences"].get()
    strategy = Strategy.parse(request.args.get("strategy") or preferences.strategy)
    extra_cash = _float_arg("extra_cash", preferences.extra_cash)

    result = simulate_strategy(state["debts"].list_active(), strategy, extra_cash)
    return jsonify({"strategy": strategy.value, "extraCash": extra_cash, **result.to_dict()})


@bp.get("/simulation/compare")
def simulation_compare():
    state = _state()
    preferences = state["preferences"].get()
    extra_cash = _float_arg("extra_cash", preferences.extra_cash)
    results = compare_strategies(state["debts"].list_active(), extra_cash)
    return jsonify(
        {
            "extraCash": extra_cash,
            "strategies": {
                strategy.value: {
                    "monthsToZero": result.months_to_zero,
                    "totalInterest": result.total_interest,
                    "firstPayoffInMonths": result.first_payoff_in_months,
                    "payoffOrder": result.payoff_order,
                }
                for strategy, result in results.items()
            },
        }
    )


@bp.get("/due-totals")
def due_totals():
    state = _state()
    debts = state["debts"].list_all()
    totals = calculate_due_totals(debts, _date_arg("today"), state["preferences"].get())
    return jsonify({**totals.to_dict(), "year_total": estimated_year_total(debts)})
