from typing import Sequence, Tuple

from .models import Category

# Explicit ordered rules: (category, keywords). Keywords are lowercase and
# matched as plain substrings. Table order is the tie-break when a text hits
# keywords of several categories (e.g. "netflix" is both Moradia and Lazer,
# "extra" is both Alimentação and Moradia).
CATEGORY_RULES: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (
        Category.FOOD,
        (
            "restaurante", "lanchonete", "padaria", "mercado", "supermercado", "açougue",
            "peixaria", "hortifruti", "confeitaria", "pizzaria", "hamburgueria", "sorveteria",
            "cafeteria", "bar", "boteco", "ifood", "uber eats", "rappi", "delivery",
            "mcdonald", "burger king", "subway", "giraffas", "bob's", "habib's",
            "assai", "carrefour", "extra", "pão de açúcar", "sonda", "mambo", "dalben",
        ),
    ),
    (
        Category.TRANSPORT,
        (
            "posto", "combustível", "gasolina", "álcool", "diesel", "etanol",
            "uber", "99", "cabify", "táxi", "transporte", "ônibus", "metrô", " trem",
            "estacionamento", "pedágio", "mecânica", "oficina", "auto center",
            "shell", "ipiranga", "br", "ale", "raizen", "petrobras",
        ),
    ),
    (
        Category.HOUSING,
        (
            "aluguel", "condomínio", "iptu", "luz", "água", "gás", "energia",
            "eletricidade", "internet", "telefone", "tv a cabo", "streaming",
            "netflix", "spotify", "amazon prime", "disney", "hbo max",
            "material de construção", "madeireira", "depósito", "leroy merlin",
            "casas bahia", "magazine luiza", "ponto frio", "extra", "leroy",
        ),
    ),
    (
        Category.LEISURE,
        (
            "cinema", "teatro", "show", "evento", "parque", "museu", "zoológico",
            "viagem", "hotel", "pousada", "hostel", "resort", "passagem aérea",
            "academia", "clube", "associação", "assinatura", "jogo", "passeio",
            "ingresso", "netflix", "spotify", "prime video", "disney+", "hbo",
        ),
    ),
    (
        Category.HEALTH,
        (
            "farmácia", "drogaria", "hospital", "clínica", "consultório", "médico",
            "dentista", "laboratório", "exame", "vacina", "remédio", "medicamento",
            "plano de saúde", "seguro saúde", "unimed", "amil", "bradesco saúde",
            "sulamérica", "hapvida", "notre dame", "intermédica", "raia", "drogasil",
        ),
    ),
)


class KeywordCategorizer:
    def __init__(self, rules: Sequence[Tuple[Category, Sequence[str]]] = CATEGORY_RULES):
        self.rules = rules

    def predict(self, text: str) -> Category:
        """
        Return the category of the first keyword (in table order) found in text.
        Falls back to Category.OTHER.
        """
        if not text:
            return Category.OTHER

        text_lower = text.lower()
        for category, keywords in self.rules:
            for keyword in keywords:
                if keyword in text_lower:
                    return category

        return Category.OTHER


_default_categorizer = KeywordCategorizer()


def categorize_expense(merchant: str, description: str, full_text: str) -> Category:
    combined = " ".join([merchant or "", description or "", full_text or ""])
    return _default_categorizer.predict(combined)
