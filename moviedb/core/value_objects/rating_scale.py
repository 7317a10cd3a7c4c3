"""
Objet valeur pour l'echelle de notation.

Deux echelles coexistent : notes entieres de 1 a 5 et notes decimales
de 1.0 a 10.0. L'echelle fixe la plage valide et le nombre de symboles
affiches dans la barre de notation.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

Number = Union[int, float]


@dataclass(frozen=True)
class RatingScale:
    """
    Echelle de notation immuable.

    Attributs :
        name : Identifiant de l'echelle ("five_star", "ten_point")
        minimum : Note minimale acceptee
        maximum : Note maximale acceptee (et nombre de symboles affiches)
        integral : True si seules les notes entieres sont valides
    """

    name: str
    minimum: Number
    maximum: Number
    integral: bool = True

    FIVE_STAR: ClassVar["RatingScale"]
    TEN_POINT: ClassVar["RatingScale"]

    def coerce(self, value: Number) -> Number:
        """Convertit une note dans le type de l'echelle (int ou float)."""
        return int(value) if self.integral else float(value)

    def clamp(self, value: Number) -> Number:
        """Ramene une note dans la plage [minimum, maximum]."""
        # NaN ne se compare a rien : on retombe sur le minimum
        if value != value:
            return self.coerce(self.minimum)
        bounded = min(max(value, self.minimum), self.maximum)
        return self.coerce(bounded)

    def contains(self, value: Number) -> bool:
        """Verifie qu'une note est valide pour cette echelle, sans correction."""
        if not self.minimum <= value <= self.maximum:
            return False
        if self.integral and value != int(value):
            return False
        return True

    @property
    def glyph_count(self) -> int:
        """Nombre de symboles de la barre de notation."""
        return int(self.maximum)

    @classmethod
    def from_name(cls, name: str) -> "RatingScale":
        """
        Retourne l'echelle predefinie correspondant au nom.

        Raises :
            ValueError : Si le nom ne correspond a aucune echelle connue
        """
        for scale in (cls.FIVE_STAR, cls.TEN_POINT):
            if scale.name == name.strip().lower():
                return scale
        raise ValueError(f"Echelle de notation inconnue : {name!r}")


RatingScale.FIVE_STAR = RatingScale(name="five_star", minimum=1, maximum=5, integral=True)
RatingScale.TEN_POINT = RatingScale(name="ten_point", minimum=1.0, maximum=10.0, integral=False)
