"""Settings de pagamento anunciadas pelo agente.

Apenas configuração: a cobrança é responsabilidade do host/facilitator,
o serviço não valida pagamentos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PRICE: str = "$0.01"
DEFAULT_NETWORK: str = "base"
DEFAULT_FACILITATOR_URL: str = "https://x402.org/facilitator"


@dataclass(frozen=True)
class PaymentSettings:
    """Configuração de pagamento publicada no manifesto.

    Attributes:
        default_price: Preço padrão por invocação
        network: Rede de liquidação
        facilitator_url: URL do facilitator
        pay_to: Endereço de recebimento (opcional)
    """

    default_price: str = DEFAULT_PRICE
    network: str = DEFAULT_NETWORK
    facilitator_url: str = DEFAULT_FACILITATOR_URL
    pay_to: str | None = None

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.facilitator_url.startswith(("http://", "https://")):
            errors.append(f"FACILITATOR_URL inválida: {self.facilitator_url}")
        if not self.pay_to:
            errors.append("ADDRESS não configurado (pagamentos sem destinatário)")
        return errors

    def as_dict(self) -> dict[str, str | None]:
        return {
            "defaultPrice": self.default_price,
            "network": self.network,
            "facilitatorUrl": self.facilitator_url,
            "payTo": self.pay_to,
        }


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_payments_from_env() -> PaymentSettings:
    """Carrega PaymentSettings de variáveis de ambiente."""
    return PaymentSettings(
        default_price=_read_optional_env("DEFAULT_PRICE") or DEFAULT_PRICE,
        network=_read_optional_env("NETWORK") or DEFAULT_NETWORK,
        facilitator_url=_read_optional_env("FACILITATOR_URL") or DEFAULT_FACILITATOR_URL,
        pay_to=_read_optional_env("ADDRESS"),
    )


@lru_cache(maxsize=1)
def get_payment_settings() -> PaymentSettings:
    """Retorna instância cacheada de PaymentSettings."""
    return _load_payments_from_env()


__all__ = ["PaymentSettings", "get_payment_settings"]
