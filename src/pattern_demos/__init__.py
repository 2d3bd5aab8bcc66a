"""
Demonstrações dos padrões GoF Strategy, Visitor e Memento
"""
from .config import ConfiguracaoInvalidaError, DemoSettings, get_settings
from .strategy import ConcreteStrategyA, ConcreteStrategyB, Context, Strategy
from .visitor import (
    Component, ConcreteComponentA, ConcreteComponentB,
    ConcreteVisitor1, ConcreteVisitor2, Visitor, client_code
)
from .memento import Caretaker, ConcreteMemento, Memento, Originator

__version__ = "1.0.0"

__all__ = [
    # Configuração
    'ConfiguracaoInvalidaError',
    'DemoSettings',
    'get_settings',

    # Strategy Pattern
    'Strategy',
    'ConcreteStrategyA',
    'ConcreteStrategyB',
    'Context',

    # Visitor Pattern
    'Component',
    'ConcreteComponentA',
    'ConcreteComponentB',
    'Visitor',
    'ConcreteVisitor1',
    'ConcreteVisitor2',
    'client_code',

    # Memento Pattern
    'Memento',
    'ConcreteMemento',
    'Originator',
    'Caretaker',
]
