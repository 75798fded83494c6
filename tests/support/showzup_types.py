"""Sample variant groups, models, view models and views shared by tests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import auto

from showzup.domain import View, ViewModel
from showzup.domain.variants import Variant


class Form(Variant):
    PAGE = auto()
    POPUP = auto()


class Size(Variant):
    SMALL = auto()
    LARGE = auto()


class Theme(Variant):
    DARK = auto()
    LIGHT = auto()


class Animal:
    def __init__(self, name: str = "animal") -> None:
        self.name = name


class Dog(Animal):
    pass


class Puppy(Dog):
    pass


class Cat(Animal):
    pass


class Rock:
    pass


class Pet(ABC):
    @abstractmethod
    def cuddle(self) -> str: ...


class AnimalVM(ViewModel):
    pass


class DogVM(ViewModel):
    pass


class CatVM(ViewModel):
    pass


class SummaryVM(ViewModel):
    pass


class AbstractVM(ViewModel, ABC):
    @abstractmethod
    def refresh(self) -> None: ...


class AnimalView(View):
    pass


class DogView(View):
    pass


class DogPageView(View):
    pass


class DogPopupView(View):
    pass


class DogAnyView(View):
    pass


class CatView(View):
    pass


class SummaryView(View):
    pass
