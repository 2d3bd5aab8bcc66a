"""
Padrão Memento: snapshots do estado do Originator com histórico de undo
"""
import random
import string
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List, Optional, cast

from .config import get_settings

CHARSET = string.ascii_lowercase + string.ascii_uppercase
FORMATO_DATA = "%Y-%m-%d %H:%M:%S"


def _agora_utc() -> datetime:
    return datetime.now(timezone.utc)


class Memento(ABC):
    """Interface vista pelo Caretaker: só metadados, nunca o estado"""

    __slots__ = ()

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_date(self) -> str:
        pass


class ConcreteMemento(Memento):
    """Memento concreto, imutável depois de criado"""

    __slots__ = ("_state", "_date")

    def __init__(self, state: str, date: str):
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_date", date)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} é imutável")

    def get_state(self) -> str:
        """Usado apenas pelo Originator ao restaurar"""
        return self._state

    def get_name(self) -> str:
        return f"{self._date} / ({self._state[:9]}...)"

    def get_date(self) -> str:
        return self._date


class Originator:
    """
    Dono do estado importante que muda com o tempo.

    O gerador aleatório e o relógio são injetáveis para que os testes
    possam fixar os valores produzidos.
    """

    def __init__(self, state: str, rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], datetime]] = None,
                 state_length: int = 30):
        self._state = state
        self._rng = rng or random.Random()
        self._clock = clock or _agora_utc
        self._state_length = state_length
        print(f"Originator: My initial state is: {state}")

    @property
    def state(self) -> str:
        return self._state

    def do_something(self):
        """Regra de negócio que altera o estado; faça backup antes"""
        print("Originator: I'm doing something important.")
        self._state = self.generate_random_string(self._state_length)
        print(f"Originator: and my state has changed to: {self._state}")

    mutate = do_something

    def generate_random_string(self, length: int = 10) -> str:
        return "".join(self._rng.choice(CHARSET) for _ in range(length))

    def save(self) -> ConcreteMemento:
        """Salva o estado atual dentro de um memento"""
        data = self._clock().replace(microsecond=0).strftime(FORMATO_DATA)
        return ConcreteMemento(self._state, data)

    def restore(self, memento: Memento):
        """Restaura o estado a partir de um memento criado por save()"""
        self._state = cast(ConcreteMemento, memento).get_state()
        print(f"Originator: My state has changed to: {self._state}")


class Caretaker:
    """Guarda a pilha de mementos sem acessar o estado do Originator"""

    def __init__(self, originator: Originator):
        self._mementos: List[Memento] = []
        self._originator = originator

    def __len__(self):
        return len(self._mementos)

    def backup(self):
        print("\nCaretaker: Saving Originator's state...")
        self._mementos.append(self._originator.save())

    def undo(self) -> bool:
        """Desfaz o último backup; histórico vazio não faz nada"""
        if not self._mementos:
            return False

        memento = self._mementos.pop()
        print(f"Caretaker: Restoring state to: {memento.get_name()}")
        self._originator.restore(memento)
        return True

    def show_history(self) -> List[str]:
        """Lista os mementos do mais antigo para o mais recente"""
        print("Caretaker: Here's the list of mementos:")
        nomes = [memento.get_name() for memento in self._mementos]
        for nome in nomes:
            print(nome)
        return nomes


def main():
    """Demonstração do padrão Memento"""
    settings = get_settings()
    rng = random.Random(settings.random_seed) if settings.random_seed is not None else None

    originator = Originator(settings.initial_state, rng=rng, state_length=settings.state_length)
    caretaker = Caretaker(originator)

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    print("")
    caretaker.show_history()

    print("\nClient: Now, let's rollback!\n")
    caretaker.undo()

    print("\nClient: Once more!\n")
    caretaker.undo()
    return 0


if __name__ == "__main__":
    exit(main())
