"""
Padrão Visitor: operações sobre componentes sem checagem de tipo
"""
from abc import ABC, abstractmethod
from typing import Iterable, List


class Component(ABC):
    """Interface Component aceita por qualquer Visitor"""

    @abstractmethod
    def accept(self, visitor: 'Visitor') -> str:
        pass


class ConcreteComponentA(Component):
    """Componente A: despacha para visit_concrete_component_a"""

    def accept(self, visitor: 'Visitor') -> str:
        # O próprio componente escolhe o método do visitor (double dispatch)
        return visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    """Componente B: despacha para visit_concrete_component_b"""

    def accept(self, visitor: 'Visitor') -> str:
        return visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class Visitor(ABC):
    """Interface Visitor com uma operação por tipo de componente"""

    @property
    def nome(self) -> str:
        return type(self).__name__

    @abstractmethod
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        pass

    @abstractmethod
    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        pass


class ConcreteVisitor1(Visitor):
    """Visitor concreto 1: junta o dado do componente ao próprio nome"""

    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        linha = f"{element.exclusive_method_of_concrete_component_a()} + {self.nome}"
        print(linha)
        return linha

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        linha = f"{element.special_method_of_concrete_component_b()} + {self.nome}"
        print(linha)
        return linha


class ConcreteVisitor2(Visitor):
    """Visitor concreto 2: mesma operação, outra identidade"""

    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        linha = f"{element.exclusive_method_of_concrete_component_a()} + {self.nome}"
        print(linha)
        return linha

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        linha = f"{element.special_method_of_concrete_component_b()} + {self.nome}"
        print(linha)
        return linha


def client_code(components: Iterable[Component], visitor: Visitor) -> List[str]:
    """Aplica o visitor a cada componente, na ordem recebida"""
    return [component.accept(visitor) for component in components]


def main():
    """Demonstração do padrão Visitor"""
    components = [
        ConcreteComponentA(),
        ConcreteComponentB(),
    ]

    print("The client code works with all visitors via the base Visitor interface:")
    visitor1 = ConcreteVisitor1()
    client_code(components, visitor1)
    print("")

    print("It allows the same client code to work with different types of visitors:")
    visitor2 = ConcreteVisitor2()
    client_code(components, visitor2)
    return 0


if __name__ == "__main__":
    exit(main())
