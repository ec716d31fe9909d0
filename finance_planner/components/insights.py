"""Narrative text shown next to each result and copied into the exports.

Explanations are pure functions of the input and result records.  The
motivational line is the only non-deterministic piece: it is drawn uniformly
from a fixed pool with a ``numpy.random.Generator`` that callers may seed.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from ..calculators.compound_interest import CompoundInterestInput, CompoundInterestResult
from ..calculators.emergency_fund import Profile
from ..calculators.first_million import FirstMillionInput, contribution_breakdown
from .formatting import format_currency, format_number

EMERGENCY_FUND = "emergency_fund"
FIRST_MILLION = "first_million"
COMPOUND_INTEREST = "compound_interest"

PROFILE_LABELS: Dict[Profile, str] = {
    Profile.PUBLIC: "Funcionário Público",
    Profile.CLT: "CLT",
    Profile.AUTONOMOUS: "MEI/Autônomo",
}

PROFILE_EXPLANATIONS: Dict[Profile, str] = {
    Profile.PUBLIC: (
        "Como funcionário público, sua estabilidade permite uma reserva menor, "
        "de 3 meses de despesas."
    ),
    Profile.CLT: (
        "Para profissionais CLT, recomenda-se uma reserva de 6 meses para cobrir "
        "imprevistos e transições de carreira."
    ),
    Profile.AUTONOMOUS: (
        "Como autônomo ou MEI, sua renda pode variar mais, por isso é importante "
        "ter uma reserva maior, de 12 meses."
    ),
}

MOTIVATIONAL_PHRASES: Dict[str, Tuple[str, ...]] = {
    EMERGENCY_FUND: (
        "Sua segurança financeira começa com uma boa reserva de emergência!",
        "Planeje hoje para não se preocupar amanhã.",
        "Cada real guardado é um passo em direção à sua liberdade financeira.",
        "Sua reserva de emergência é seu escudo contra imprevistos.",
    ),
    FIRST_MILLION: (
        "O primeiro milhão é o mais difícil. Depois, o dinheiro trabalha para você!",
        "Consistência é a chave para alcançar grandes objetivos financeiros.",
        "Pequenos investimentos hoje, grandes resultados amanhã.",
        "Seu futuro milionário começa com as decisões que você toma hoje.",
    ),
    COMPOUND_INTEREST: (
        "O tempo é seu maior aliado nos investimentos. Comece hoje!",
        "Juros compostos são a oitava maravilha do mundo. Quem entende, ganha; quem não entende, paga.",
        "Pequenos investimentos consistentes geram grandes resultados ao longo do tempo.",
        "A mágica dos juros compostos transforma pequenas economias em grandes fortunas.",
    ),
}


def pick_motivational_phrase(calculator: str, rng: Optional[np.random.Generator] = None) -> str:
    pool = MOTIVATIONAL_PHRASES[calculator]
    rng = rng if rng is not None else np.random.default_rng()
    return pool[int(rng.integers(len(pool)))]


def emergency_fund_explanation(profile: Profile) -> str:
    return PROFILE_EXPLANATIONS[Profile(profile)]


def first_million_explanation(data: FirstMillionInput, monthly_contribution: float) -> str:
    """Explain how the target is reached.

    A contribution of exactly 0 means the initial investment alone reaches the
    million; otherwise the text quotes the total invested and the interest
    earned, both from :func:`contribution_breakdown`.
    """
    if monthly_contribution == 0:
        return (
            f"Com seu investimento inicial de {format_currency(data.initial_investment)} "
            f"e uma taxa de {format_number(data.annual_interest_rate_pct)}% ao ano, "
            f"você já alcançará o primeiro milhão em {data.years} anos sem precisar "
            f"investir mensalmente!"
        )

    total_invested, interest_earned = contribution_breakdown(data, monthly_contribution)
    return (
        f"Investindo {format_currency(monthly_contribution)} por mês, junto com seu "
        f"investimento inicial de {format_currency(data.initial_investment)}, você "
        f"alcançará R$ 1 milhão em {data.years} anos. Você terá investido um total de "
        f"{format_currency(total_invested)} e ganho {format_currency(interest_earned)} em juros."
    )


def compound_interest_explanation(data: CompoundInterestInput, result: CompoundInterestResult) -> str:
    return (
        f"A mágica dos juros compostos transformou seu investimento inicial de "
        f"{format_currency(data.initial_capital)} em {format_currency(result.final_amount)}."
    )
