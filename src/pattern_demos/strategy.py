"""
Padrão Strategy: algoritmos de ordenação intercambiáveis
"""
from abc import ABC, abstractmethod
from typing import List, Optional

DADOS_PADRAO = ['a', 'b', 'c', 'd', 'e']


class Strategy(ABC):
    """Interface Strategy para transformação de sequências"""

    @abstractmethod
    def do_algorithm(self, data: List[str]) -> List[str]:
        """Aplica o algoritmo sobre a sequência recebida"""
        pass


class ConcreteStrategyA(Strategy):
    """Strategy concreta para ordenação crescente"""

    def do_algorithm(self, data: List[str]) -> List[str]:
        return sorted(data)


class ConcreteStrategyB(Strategy):
    """Strategy concreta para ordem invertida"""

    def do_algorithm(self, data: List[str]) -> List[str]:
        return list(reversed(data))


class Context:
    """Contexto que delega o trabalho para a strategy atual"""

    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def set_strategy(self, strategy: Strategy):
        """Troca a strategy; vale a partir da próxima execução"""
        self._strategy = strategy

    def do_some_business_logic(self, data: Optional[List[str]] = None) -> List[str]:
        """Executa a strategy atual sobre uma cópia dos dados"""
        entrada = list(DADOS_PADRAO if data is None else data)
        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        resultado = self._strategy.do_algorithm(entrada)
        print(",".join(resultado))
        return resultado

    execute = do_some_business_logic


def main():
    """Demonstração do padrão Strategy"""
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic()
    print("")

    print("Client: Strategy is set to reverse sorting.")
    context.set_strategy(ConcreteStrategyB())
    context.do_some_business_logic()
    return 0


if __name__ == "__main__":
    exit(main())
