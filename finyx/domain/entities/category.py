"""Transaction categories and their display labels."""

from enum import Enum


class Category(str, Enum):
    """Closed set of earning and spending categories."""

    SALARIO = "salario"
    FREELANCE = "freelance"
    INVESTIMENTOS = "investimentos"
    ALIMENTACAO = "alimentacao"
    TRANSPORTE = "transporte"
    MORADIA = "moradia"
    SAUDE = "saude"
    EDUCACAO = "educacao"
    LAZER = "lazer"
    COMPRAS = "compras"
    CONTAS = "contas"
    OUTROS = "outros"


CATEGORY_LABELS: dict[str, str] = {
    Category.SALARIO.value: "Salário",
    Category.FREELANCE.value: "Freelance",
    Category.INVESTIMENTOS.value: "Investimentos",
    Category.ALIMENTACAO.value: "Alimentação",
    Category.TRANSPORTE.value: "Transporte",
    Category.MORADIA.value: "Moradia",
    Category.SAUDE.value: "Saúde",
    Category.EDUCACAO.value: "Educação",
    Category.LAZER.value: "Lazer",
    Category.COMPRAS.value: "Compras",
    Category.CONTAS.value: "Contas",
    Category.OUTROS.value: "Outros",
}

UNCATEGORIZED_LABEL = "Sem categoria"


def category_label(category: str | None) -> str:
    """
    Look up the display label for a category value.

    Unknown values fall back to the raw value so records written by
    other clients still render; an empty value gets a placeholder.
    """
    if not category:
        return UNCATEGORIZED_LABEL
    return CATEGORY_LABELS.get(category, category)
