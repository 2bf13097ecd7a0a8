# parcdistractii

A small library that models an amusement park. A park holds attractions,
employees and visitors. Each visitor may hold a ticket. The park can print its
contents and check whether a visitor may ride a given attraction. It also works
out ticket revenue, salary costs and estimated profit.

## Installation

```
pip install .
```

## Modules

- `parcdistractii.bilet`: tickets. There is an abstract base class `Bilet` and
  three kinds of ticket: `BiletCopil`, `BiletAdult` and `BiletVIP`.
  `pret_final()` gives the price the visitor pays. `clone()` returns an
  independent copy. `Bilet.pret_mediu` holds a running average of base prices,
  updated each time a ticket is created.
- `parcdistractii.atractie`: attractions. There is an abstract base class
  `Atractie` and three kinds of attraction: `MontagneRusse`, `Carusel` and
  `CasaGroazei`. `Atractie.numar_total_atractii()` counts the attractions
  created so far, clones included.
- `parcdistractii.angajat`: employees. There is an abstract base class
  `Angajat` and three roles: `OperatorAtractie`, `AgentPaza` and `Casier`.
  `salariu_total()` gives an employee's total pay. `Angajat.salariu_mediu()`
  returns a running average of the salaries seen so far.
- `parcdistractii.vizitator`: visitors. There is an abstract base class
  `Vizitator` and three kinds of visitor: `Copil`, `Adolescent` and `Adult`.
  `poate_accesa_atractia(inaltime_minima, varsta_necesara=0)` tells whether a
  visitor may ride. `clone()` also copies the visitor's ticket.
- `parcdistractii.parc`: `ParcDistractii`, the park itself. It has these
  methods:
  - `adauga_atractie`, `adauga_angajat` and `adauga_vizitator` add a member.
  - `afiseaza_atractii`, `afiseaza_angajati`, `afiseaza_vizitatori` and
    `afiseaza_statistici` print the park's contents and statistics.
  - `verifica_acces_atractie(nume_vizitator, nume_atractie)` checks whether a
    visitor may ride an attraction.
  - `demonstratie_tipuri` describes each attraction and employee by its
    concrete kind.
  - `venit_total` and `costuri_salariale` return revenue and salary costs.
  - `copy` returns a deep copy of the park.
  - `ParcDistractii.numar_parcuri()` counts the parks created so far.

  Every printing method takes an optional `out` stream and writes to standard
  output by default.

Each class has a `tip` property that gives its kind as text. `str()` gives a
one-line description of any object.

## Example

```python
from parcdistractii.parc import ParcDistractii
from parcdistractii.atractie import MontagneRusse
from parcdistractii.vizitator import Copil
from parcdistractii.bilet import BiletCopil

parc = ParcDistractii("Wonderland Adventure Park")
parc.adauga_atractie(MontagneRusse("Dragon", 140, 24, 90))
parc.adauga_vizitator(Copil("Ana", 7, 145, BiletCopil(60.0, 1, 7), True))

parc.verifica_acces_atractie("Ana", "Dragon")
print(parc.venit_total())  # 30.0
```

## Rules

Pricing:

- a child ticket costs half the base price;
- an adult ticket adds 30 RON when it includes a Fast Pass;
- a VIP ticket costs twice the base price, plus 50 RON for lounge access.

Salaries:

- base salary plus 100 RON per year of experience;
- ride operators get another 500 RON;
- security agents get another 300 RON.

Access:

- a visitor may ride only if they are at least as tall as the attraction's
  minimum height;
- a child under 8 may ride only when accompanied by an adult.

## What the package does not do

The package has no interactive menu and no command-line program. You create
parks, attractions, employees and visitors in Python code. Nothing checks the
input ranges when objects are created, and the package defines no exception
classes of its own.

## Tests

```
pip install .[test]
pytest
```