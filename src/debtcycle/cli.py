"""Flask CLI commands for DebtCycle."""

from __future__ import annotations

import math

import click


def _finite(ctx: click.Context, param: click.Parameter, value: float | None) -> float | None:
    if value is not None and not math.isfinite(value):
        raise click.BadParameter("must be a finite number")
    return value


def _format_months(months: int) -> str:
    years, remainder = divmod(months, 12)
    if not years:
        return f"{months} mo"
    return f"{months} mo ({years}y {remainder}m)"


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    def _state() -> dict:
        return app.extensions["debtcycle"]

    @app.cli.command("debtcycle-seed")
    def debtcycle_seed() -> None:
        """Replace stored debts with the sample set and reset preferences."""

        from .services.seed import seed_sample_data

        state = _state()
        debts = seed_sample_data(
            debt_repository=state["debts"], preferences_repository=state["preferences"]
        )
        click.echo(f"Seeded {len(debts)} debts.")

    @app.cli.command("debtcycle-simulate")
    @click.option(
        "--strategy",
        type=click.Choice(["snowball", "avalanche", "hybrid"], case_sensitive=False),
        default=None,
        help="Ordering policy; defaults to the stored preference.",
    )
    @click.option("--extra-cash", type=click.FloatRange(min=0), default=None, callback=_finite)
    def debtcycle_simulate(strategy: str | None, extra_cash: float | None) -> None:
        """Print the payoff projection for one strategy."""

        from .services.planner import Strategy, simulate_strategy

        state = _state()
        preferences = state["preferences"].get()
        chosen = Strategy.parse(strategy or preferences.strategy)
        cash = preferences.extra_cash if extra_cash is None else extra_cash
        debts = state["debts"].list_active()
        names = {debt.id: debt.name for debt in debts}

        result = simulate_strategy(debts, chosen, cash)
        click.echo(f"Strategy: {chosen.value} (extra cash {cash:.2f}/mo)")
        click.echo(f"Debt-free in: {_format_months(result.months_to_zero)}")
        click.echo(f"First payoff in: {_format_months(result.first_payoff_in_months)}")
        click.echo(f"Total interest: {result.total_interest:.2f}")
        if result.hit_month_cap:
            click.echo("Warning: payments never catch up with interest on at least one debt.")
        for position, debt_id in enumerate(result.payoff_order, start=1):
            click.echo(f"  {position}. {names.get(debt_id, debt_id)}")

    @app.cli.command("debtcycle-compare")
    @click.option("--extra-cash", type=click.FloatRange(min=0), default=None, callback=_finite)
    def debtcycle_compare(extra_cash: float | None) -> None:
        """Compare all payoff strategies side by side."""

        from .services.planner import compare_strategies

        state = _state()
        cash = state["preferences"].get().extra_cash if extra_cash is None else extra_cash
        results = compare_strategies(state["debts"].list_active(), cash)
        for strategy, result in results.items():
            click.echo(
                f"{strategy.value:<10} {_format_months(result.months_to_zero):>18}"
                f"  interest {result.total_interest:>12.2f}"
                f"  first payoff {result.first_payoff_in_months} mo"
            )

    @app.cli.command("debtcycle-pay")
    @click.argument("debt_id", type=int)
    @click.argument("amount", type=float, callback=_finite)
    @click.option(
        "--cycle/--no-cycle",
        default=True,
        help="Count the payment toward the current billing cycle.",
    )
    def debtcycle_pay(debt_id: int, amount: float, cycle: bool) -> None:
        """Log a payment against a debt."""

        from .services.payments import log_payment

        state = _state()
        try:
            debt, _payment = log_payment(
                debt_repository=state["debts"],
                payment_repository=state["payments"],
                debt_id=debt_id,
                amount=amount,
                count_toward_cycle=cycle,
            )
        except (LookupError, ValueError) as exc:
            raise click.ClickException(str(exc.args[0] if exc.args else exc)) from exc

        click.echo(f"{debt.name}: balance {debt.balance:.2f}, next due {debt.next_due_date.isoformat()}")
        if not debt.active:
            click.echo(f"{debt.name} is paid off.")
