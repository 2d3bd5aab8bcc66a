"""
Executa as três demonstrações de padrões GoF em sequência
Strategy, Visitor e Memento são independentes entre si
"""
from pattern_demos import memento, strategy, visitor

DEMOS = [
    ("Strategy", strategy.main),
    ("Visitor", visitor.main),
    ("Memento", memento.main),
]


def main():
    """Função principal"""
    for nome, demo in DEMOS:
        print("=" * 60)
        print(f"Padrão {nome}")
        print("=" * 60)
        demo()
        print("")
    return 0


if __name__ == "__main__":
    exit(main())
