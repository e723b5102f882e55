"""Literal element records, one dict per element in ascending atomic number.

Values are kept exactly as curated. Known quirks left
as recorded (see DESIGN.md): Cl (17) and Sn (50) carry period 1, Lu (71)
and Lr (103) carry group 18, and Tl/Pb/Bi/Po (81-84) are tagged Actinide.
"""

ELEMENT_RECORDS: list[dict] = [
    {"symbol": "H", "name": "Hydrogen", "atomicNumber": 1, "atomicMass": 1.008, "kind": "Nonmetal", "state": "Gas", "period": 1, "group": 1, "electronegativity": 2.2, "electronConfiguration": "1s1"},
    {"symbol": "He", "name": "Helium", "atomicNumber": 2, "atomicMass": 4.002, "kind": "Noble Gas", "state": "Gas", "period": 1, "group": 18, "electronegativity": None, "electronConfiguration": "1s2"},
    {"symbol": "Li", "name": "Lithium", "atomicNumber": 3, "atomicMass": 6.941, "kind": "Alkali Metal", "state": "Solid", "period": 2, "group": 1, "electronegativity": 0.98, "electronConfiguration": "1s2 2s1"},
    {"symbol": "Be", "name": "Beryllium", "atomicNumber": 4, "atomicMass": 9.012, "kind": "Alkaline Earth Metal", "state": "Solid", "period": 2, "group": 2, "electronegativity": 1.57, "electronConfiguration": "1s2 2s2"},
    {"symbol": "B", "name": "Boron", "atomicNumber": 5, "atomicMass": 10.811, "kind": "Metalloid", "state": "Solid", "period": 2, "group": 13, "electronegativity": 2.04, "electronConfiguration": "1s2 2s2 2p1"},
    {"symbol": "C", "name": "Carbon", "atomicNumber": 6, "atomicMass": 12.011, "kind": "Nonmetal", "state": "Solid", "period": 2, "group": 14, "electronegativity": 2.55, "electronConfiguration": "1s2 2s2 2p2"},
    {"symbol": "N", "name": "Nitrogen", "atomicNumber": 7, "atomicMass": 14.007, "kind": "Nonmetal", "state": "Gas", "period": 2, "group": 15, "electronegativity": 3.04, "electronConfiguration": "1s2 2s2 2p3"},
    {"symbol": "O", "name": "Oxygen", "atomicNumber": 8, "atomicMass": 15.999, "kind": "Nonmetal", "state": "Gas", "period": 2, "group": 16, "electronegativity": 3.44, "electronConfiguration": "1s2 2s2 2p4"},
    {"symbol": "F", "name": "Fluorine", "atomicNumber": 9, "atomicMass": 18.998, "kind": "Halogen", "state": "Gas", "period": 2, "group": 17, "electronegativity": 3.98, "electronConfiguration": "1s2 2s2 2p5"},
    {"symbol": "Ne", "name": "Neon", "atomicNumber": 10, "atomicMass": 20.18, "kind": "Noble Gas", "state": "Gas", "period": 2, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6"},
    {"symbol": "Na", "name": "Sodium", "atomicNumber": 11, "atomicMass": 22.99, "kind": "Alkali Metal", "state": "Solid", "period": 3, "group": 1, "electronegativity": 0.93, "electronConfiguration": "1s2 2s2 2p6 3s1"},
    {"symbol": "Mg", "name": "Magnesium", "atomicNumber": 12, "atomicMass": 24.305, "kind": "Alkaline Earth Metal", "state": "Solid", "period": 3, "group": 2, "electronegativity": 1.31, "electronConfiguration": "1s2 2s2 2p6 3s2"},
    {"symbol": "Al", "name": "Aluminum", "atomicNumber": 13, "atomicMass": 26.982, "kind": "Post Transition Metal", "state": "Solid", "period": 3, "group": 13, "electronegativity": 1.61, "electronConfiguration": "1s2 2s2 2p6 3s2 3p1"},
    {"symbol": "Si", "name": "Silicon", "atomicNumber": 14, "atomicMass": 28.086, "kind": "Metalloid", "state": "Solid", "period": 3, "group": 14, "electronegativity": 1.9, "electronConfiguration": "1s2 2s2 2p6 3s2 3p2"},
    {"symbol": "P", "name": "Phosphorus", "atomicNumber": 15, "atomicMass": 30.974, "kind": "Nonmetal", "state": "Solid", "period": 3, "group": 15, "electronegativity": 2.19, "electronConfiguration": "1s2 2s2 2p6 3s2 3p3"},
    {"symbol": "S", "name": "Sulfur", "atomicNumber": 16, "atomicMass": 32.065, "kind": "Nonmetal", "state": "Solid", "period": 3, "group": 16, "electronegativity": 2.58, "electronConfiguration": "1s2 2s2 2p6 3s2 3p4"},
    {"symbol": "Cl", "name": "Chlorine", "atomicNumber": 17, "atomicMass": 35.453, "kind": "Halogen", "state": "Gas", "period": 1, "group": 17, "electronegativity": 3.16, "electronConfiguration": "1s2 2s2 2p6 3s2 3p5"},
    {"symbol": "Ar", "name": "Argon", "atomicNumber": 18, "atomicMass": 39.948, "kind": "Noble Gas", "state": "Gas", "period": 3, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6"},
    {"symbol": "K", "name": "Potassium", "atomicNumber": 19, "atomicMass": 39.098, "kind": "Alkali Metal", "state": "Solid", "period": 4, "group": 1, "electronegativity": 0.82, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 4s1"},
    {"symbol": "Ca", "name": "Calcium", "atomicNumber": 20, "atomicMass": 40.078, "kind": "Alkaline Earth Metal", "state": "Solid", "period": 4, "group": 2, "electronegativity": 1.0, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 4s2"},
    {"symbol": "Sc", "name": "Scandium", "atomicNumber": 21, "atomicMass": 44.956, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 3, "electronegativity": 1.36, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d1 4s2"},
    {"symbol": "Ti", "name": "Titanium", "atomicNumber": 22, "atomicMass": 47.867, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 4, "electronegativity": 1.54, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d2 4s2"},
    {"symbol": "V", "name": "Vanadium", "atomicNumber": 23, "atomicMass": 50.942, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 5, "electronegativity": 1.63, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d3 4s2"},
    {"symbol": "Cr", "name": "Chromium", "atomicNumber": 24, "atomicMass": 51.996, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 6, "electronegativity": 1.66, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d5 4s1"},
    {"symbol": "Mn", "name": "Manganese", "atomicNumber": 25, "atomicMass": 54.938, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 7, "electronegativity": 1.55, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d5 4s2"},
    {"symbol": "Fe", "name": "Iron", "atomicNumber": 26, "atomicMass": 55.845, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 8, "electronegativity": 1.83, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d6 4s2"},
    {"symbol": "Co", "name": "Cobalt", "atomicNumber": 27, "atomicMass": 58.933, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 9, "electronegativity": 1.88, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d7 4s2"},
    {"symbol": "Ni", "name": "Nickel", "atomicNumber": 28, "atomicMass": 58.693, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 10, "electronegativity": 1.91, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d8 4s2"},
    {"symbol": "Cu", "name": "Copper", "atomicNumber": 29, "atomicMass": 63.546, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 11, "electronegativity": 1.9, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s1"},
    {"symbol": "Zn", "name": "Zinc", "atomicNumber": 30, "atomicMass": 65.38, "kind": "Transition Metal", "state": "Solid", "period": 4, "group": 12, "electronegativity": 1.65, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d1 4s2"},
    {"symbol": "Ga", "name": "Gallium", "atomicNumber": 31, "atomicMass": 69.723, "kind": "Post Transition Metal", "state": "Solid", "period": 4, "group": 13, "electronegativity": 1.81, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p1"},
    {"symbol": "Ge", "name": "Germanium", "atomicNumber": 32, "atomicMass": 72.64, "kind": "Metalloid", "state": "Solid", "period": 4, "group": 14, "electronegativity": 2.01, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p2"},
    {"symbol": "As", "name": "Arsenic", "atomicNumber": 33, "atomicMass": 74.922, "kind": "Metalloid", "state": "Solid", "period": 4, "group": 15, "electronegativity": 2.18, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p3"},
    {"symbol": "Se", "name": "Selenium", "atomicNumber": 34, "atomicMass": 78.96, "kind": "Nonmetal", "state": "Solid", "period": 4, "group": 16, "electronegativity": 2.55, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p4"},
    {"symbol": "Br", "name": "Bromine", "atomicNumber": 35, "atomicMass": 79.904, "kind": "Halogen", "state": "Liquid", "period": 4, "group": 17, "electronegativity": 2.96, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p5"},
    {"symbol": "Kr", "name": "Krypton", "atomicNumber": 36, "atomicMass": 83.798, "kind": "Noble Gas", "state": "Gas", "period": 4, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6"},
    {"symbol": "Rb", "name": "Rubidium", "atomicNumber": 37, "atomicMass": 85.468, "kind": "Alkali Metal", "state": "Solid", "period": 5, "group": 1, "electronegativity": 0.82, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 5s1"},
    {"symbol": "Sr", "name": "Strontium", "atomicNumber": 38, "atomicMass": 87.62, "kind": "Alkaline Earth Metal", "state": "Solid", "period": 5, "group": 2, "electronegativity": 0.95, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 5s2"},
    {"symbol": "Y", "name": "Yttrium", "atomicNumber": 39, "atomicMass": 88.906, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 3, "electronegativity": 1.22, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d1 5s2"},
    {"symbol": "Zr", "name": "Zirconium", "atomicNumber": 40, "atomicMass": 91.224, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 4, "electronegativity": 1.33, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d2 5s2"},
    {"symbol": "Nb", "name": "Niobium", "atomicNumber": 41, "atomicMass": 98.906, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 5, "electronegativity": 1.6, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d4 5s1"},
    {"symbol": "Mo", "name": "Molybdenum", "atomicNumber": 42, "atomicMass": 95.96, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 6, "electronegativity": 2.16, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d5 5s1"},
    {"symbol": "Tc", "name": "Technetium", "atomicNumber": 43, "atomicMass": 98.0, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 7, "electronegativity": 1.9, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d5 5s2"},
    {"symbol": "Ru", "name": "Ruthenium", "atomicNumber": 44, "atomicMass": 101.107, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 8, "electronegativity": 2.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d7 5s1"},
    {"symbol": "Rh", "name": "Rhodium", "atomicNumber": 45, "atomicMass": 102.906, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 9, "electronegativity": 2.28, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d8 5s1"},
    {"symbol": "Pd", "name": "Palladium", "atomicNumber": 46, "atomicMass": 106.42, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 10, "electronegativity": 2.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10"},
    {"symbol": "Ag", "name": "Silver", "atomicNumber": 47, "atomicMass": 7.869, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 11, "electronegativity": 1.93, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s1"},
    {"symbol": "Cd", "name": "Cadmium", "atomicNumber": 48, "atomicMass": 112.411, "kind": "Transition Metal", "state": "Solid", "period": 5, "group": 12, "electronegativity": 1.69, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2"},
    {"symbol": "In", "name": "Indium", "atomicNumber": 49, "atomicMass": 114.818, "kind": "Post Transition Metal", "state": "Solid", "period": 5, "group": 13, "electronegativity": 1.78, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p1"},
    {"symbol": "Sn", "name": "Tin", "atomicNumber": 50, "atomicMass": 118.71, "kind": "Post Transition Metal", "state": "Solid", "period": 1, "group": 14, "electronegativity": 1.96, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p2"},
    {"symbol": "Sb", "name": "Antimony", "atomicNumber": 51, "atomicMass": 121.76, "kind": "Metalloid", "state": "Solid", "period": 5, "group": 15, "electronegativity": 2.05, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p3"},
    {"symbol": "Te", "name": "Tellurium", "atomicNumber": 52, "atomicMass": 127.6, "kind": "Metalloid", "state": "Solid", "period": 5, "group": 16, "electronegativity": 2.1, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p4"},
    {"symbol": "I", "name": "Iodine", "atomicNumber": 53, "atomicMass": 126.904, "kind": "Halogen", "state": "Solid", "period": 5, "group": 17, "electronegativity": 2.66, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p5"},
    {"symbol": "Xe", "name": "Xenon", "atomicNumber": 54, "atomicMass": 131.293, "kind": "Noble Gas", "state": "Gas", "period": 5, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p6"},
    {"symbol": "Cs", "name": "Caesium", "atomicNumber": 55, "atomicMass": 132.905, "kind": "Alkali Metal", "state": "Solid", "period": 6, "group": 1, "electronegativity": 0.79, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p6 6s1"},
    {"symbol": "Ba", "name": "Barium", "atomicNumber": 56, "atomicMass": 137.327, "kind": "Alkaline Earth Metal", "state": "Solid", "period": 6, "group": 2, "electronegativity": 0.89, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p6 6s2"},
    {"symbol": "La", "name": "Lanthanum", "atomicNumber": 57, "atomicMass": 138.905, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.1, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 5s2 5p6 5d1 6s2"},
    {"symbol": "Ce", "name": "Cerium", "atomicNumber": 58, "atomicMass": 140.116, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.12, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f1 5s2 5p6 5d1 6s2"},
    {"symbol": "Pr", "name": "Praseodymium", "atomicNumber": 59, "atomicMass": 140.908, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.13, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f3 5s2 5p6 6s2"},
    {"symbol": "Nd", "name": "Neodymium", "atomicNumber": 60, "atomicMass": 144.242, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.14, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f4 5s2 5p6 6s2"},
    {"symbol": "Pm", "name": "Promethium", "atomicNumber": 61, "atomicMass": 145.0, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.13, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f5 5s2 5p6 6s2"},
    {"symbol": "Sm", "name": "Samarium", "atomicNumber": 62, "atomicMass": 150.36, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.17, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f6 5s2 5p6 6s2"},
    {"symbol": "Eu", "name": "Europium", "atomicNumber": 63, "atomicMass": 151.964, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f7 5s2 5p6 6s2"},
    {"symbol": "Gd", "name": "Gadolinium", "atomicNumber": 64, "atomicMass": 157.25, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f7 5s2 5p6 5d1 6s2"},
    {"symbol": "Tb", "name": "Terbium", "atomicNumber": 65, "atomicMass": 158.925, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f9 5s2 5p6 6s2"},
    {"symbol": "Dy", "name": "Dysprosium", "atomicNumber": 66, "atomicMass": 162.5, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.22, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f10 5s2 5p6 6s2"},
    {"symbol": "Ho", "name": "Holmium", "atomicNumber": 67, "atomicMass": 164.93, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.23, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f11 5s2 5p6 6s2"},
    {"symbol": "Er", "name": "Erbium", "atomicNumber": 68, "atomicMass": 167.259, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.24, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f12 5s2 5p6 6s2"},
    {"symbol": "Tm", "name": "Thulium", "atomicNumber": 69, "atomicMass": 168.934, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.25, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f13 5s2 5p6 6s2"},
    {"symbol": "Yb", "name": "Ytterbium", "atomicNumber": 70, "atomicMass": 173.054, "kind": "Lanthanide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.1, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 6s2"},
    {"symbol": "Lu", "name": "Lutetium", "atomicNumber": 71, "atomicMass": 174.967, "kind": "Lanthanide", "state": "Solid", "period": 6, "group": 18, "electronegativity": 1.27, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d1 6s2"},
    {"symbol": "Hf", "name": "Hafnium", "atomicNumber": 72, "atomicMass": 178.49, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 4, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d2 6s2"},
    {"symbol": "Ta", "name": "Tantalum", "atomicNumber": 73, "atomicMass": 180.948, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 5, "electronegativity": 1.5, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d3 6s2"},
    {"symbol": "W", "name": "Tungsten", "atomicNumber": 74, "atomicMass": 183.84, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 6, "electronegativity": 2.36, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d4 6s2"},
    {"symbol": "Re", "name": "Rhenium", "atomicNumber": 75, "atomicMass": 186.207, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 7, "electronegativity": 1.9, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d5 6s2"},
    {"symbol": "Os", "name": "Osmium", "atomicNumber": 76, "atomicMass": 190.23, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 8, "electronegativity": 2.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d6 6s2"},
    {"symbol": "Ir", "name": "Iridium", "atomicNumber": 77, "atomicMass": 192.217, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 9, "electronegativity": 2.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d7 6s2"},
    {"symbol": "Pt", "name": "Platinum", "atomicNumber": 78, "atomicMass": 195.084, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 10, "electronegativity": 2.28, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d9 6s1"},
    {"symbol": "Au", "name": "Gold", "atomicNumber": 79, "atomicMass": 196.967, "kind": "Transition Metal", "state": "Solid", "period": 6, "group": 11, "electronegativity": 2.54, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s1"},
    {"symbol": "Hg", "name": "Mercury", "atomicNumber": 80, "atomicMass": 200.59, "kind": "Transition Metal", "state": "Liquid", "period": 6, "group": 12, "electronegativity": 2.0, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2"},
    {"symbol": "Tl", "name": "Thallium", "atomicNumber": 81, "atomicMass": 204.383, "kind": "Actinide", "state": "Solid", "period": 6, "group": 13, "electronegativity": 2.04, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p1"},
    {"symbol": "Pb", "name": "Lead", "atomicNumber": 82, "atomicMass": 207.2, "kind": "Actinide", "state": "Solid", "period": 6, "group": 14, "electronegativity": 2.33, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p2"},
    {"symbol": "Bi", "name": "Bismuth", "atomicNumber": 83, "atomicMass": 208.98, "kind": "Actinide", "state": "Solid", "period": 6, "group": 15, "electronegativity": 2.02, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p3"},
    {"symbol": "Po", "name": "Polonium", "atomicNumber": 84, "atomicMass": 210.0, "kind": "Actinide", "state": "Solid", "period": 6, "group": 16, "electronegativity": 2.0, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p4"},
    {"symbol": "At", "name": "Astatine", "atomicNumber": 85, "atomicMass": 210.0, "kind": "Halogen", "state": "Solid", "period": 6, "group": 17, "electronegativity": 2.2, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p5"},
    {"symbol": "Rn", "name": "Radon", "atomicNumber": 86, "atomicMass": 222.0, "kind": "Noble Gas", "state": "Gas", "period": 6, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p6"},
    {"symbol": "Fr", "name": "Francium", "atomicNumber": 87, "atomicMass": 223.0, "kind": "Alkali Metal", "state": "Solid", "period": 7, "group": 1, "electronegativity": 0.7, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s24p6 4d10 4f14 5s2 5p6 5d10 6s2 6p6 7s1"},
    {"symbol": "Ra", "name": "Radium", "atomicNumber": 88, "atomicMass": 226.0, "kind": "Alkaline Earth Metal", "state": "Solid", "period": 7, "group": 2, "electronegativity": 0.9, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p6 7s2"},
    {"symbol": "Ac", "name": "Actinium", "atomicNumber": 89, "atomicMass": 227.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.1, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p6 6d1 7s2"},
    {"symbol": "Th", "name": "Thorium", "atomicNumber": 90, "atomicMass": 232.038, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 6s2 6p6 6d2 7s2"},
    {"symbol": "Pa", "name": "Protactinium", "atomicNumber": 91, "atomicMass": 231.036, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.5, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f2 6s2 6p6 6d1 7s2"},
    {"symbol": "U", "name": "Uranium", "atomicNumber": 92, "atomicMass": 238.029, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.38, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f3 6s2 6p6 6d1 7s2"},
    {"symbol": "Np", "name": "Neptunium", "atomicNumber": 93, "atomicMass": 237.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.36, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f4 6s2 6p6 6d1 7s2"},
    {"symbol": "Pu", "name": "Plutonium", "atomicNumber": 94, "atomicMass": 244.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.28, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f6 6s2 6p6 7s2"},
    {"symbol": "Am", "name": "Americium", "atomicNumber": 95, "atomicMass": 243.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f7 6s2 6p6 7s2"},
    {"symbol": "Cm", "name": "Curium", "atomicNumber": 96, "atomicMass": 247.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f7 6s2 6p6 6d1 7s2"},
    {"symbol": "Bk", "name": "Berkelium", "atomicNumber": 97, "atomicMass": 247.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f9 6s2 6p6 7s2"},
    {"symbol": "Cf", "name": "Californium", "atomicNumber": 98, "atomicMass": 251.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f10 6s2 6p6 7s2"},
    {"symbol": "Es", "name": "Einsteinium", "atomicNumber": 99, "atomicMass": 252.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f11 6s2 6p6 7s2"},
    {"symbol": "Fm", "name": "Fermium", "atomicNumber": 100, "atomicMass": 257.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f12 6s2 6p6 7s2"},
    {"symbol": "Md", "name": "Mendelevium", "atomicNumber": 101, "atomicMass": 258.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f13 6s2 6p6 7s2"},
    {"symbol": "No", "name": "Nobelium", "atomicNumber": 102, "atomicMass": 259.0, "kind": "Actinide", "state": "Solid", "period": None, "group": None, "electronegativity": 1.3, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 7s2"},
    {"symbol": "Lr", "name": "Lawrencium", "atomicNumber": 103, "atomicMass": 262.0, "kind": "Actinide", "state": "Solid", "period": 7, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 7s2 7p1"},
    {"symbol": "Rf", "name": "Rutherfordium", "atomicNumber": 104, "atomicMass": 261.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 4, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d2 7s2"},
    {"symbol": "Db", "name": "Dubnium", "atomicNumber": 105, "atomicMass": 262.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 5, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d3 7s2"},
    {"symbol": "Sg", "name": "Seaborgium", "atomicNumber": 106, "atomicMass": 266.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 6, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d4 7s2"},
    {"symbol": "Bh", "name": "Bohrium", "atomicNumber": 107, "atomicMass": 264.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 7, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d5 7s2"},
    {"symbol": "Hs", "name": "Hassium", "atomicNumber": 108, "atomicMass": 267.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 8, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d6 7s2"},
    {"symbol": "Mt", "name": "Meitnerium", "atomicNumber": 109, "atomicMass": 268.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 9, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d7 7s2"},
    {"symbol": "Ds", "name": "Darmstadtium", "atomicNumber": 110, "atomicMass": 271.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 10, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d8 7s2"},
    {"symbol": "Rg", "name": "Roentgenium", "atomicNumber": 111, "atomicMass": 272.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 11, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d9 7s2"},
    {"symbol": "Cn", "name": "Copernicium", "atomicNumber": 112, "atomicMass": 285.0, "kind": "Transition Metal", "state": "Solid", "period": 7, "group": 12, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2"},
    {"symbol": "Nh", "name": "Nihonium", "atomicNumber": 113, "atomicMass": 284.0, "kind": "Post Transition Metal", "state": "Solid", "period": 7, "group": 13, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2 7p1"},
    {"symbol": "Fl", "name": "Flerovium", "atomicNumber": 114, "atomicMass": 289.0, "kind": "Post Transition Metal", "state": "Solid", "period": 7, "group": 14, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2 7p2"},
    {"symbol": "Mc", "name": "Moscovium", "atomicNumber": 115, "atomicMass": 288.0, "kind": "Post Transition Metal", "state": "Solid", "period": 7, "group": 15, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2 7p3"},
    {"symbol": "Lv", "name": "Livermorium", "atomicNumber": 116, "atomicMass": 292.0, "kind": "Post Transition Metal", "state": "Solid", "period": 7, "group": 16, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2 7p4"},
    {"symbol": "Ts", "name": "Tennessine", "atomicNumber": 117, "atomicMass": 295.0, "kind": "Halogen", "state": "Solid", "period": 7, "group": 17, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2 7p5"},
    {"symbol": "Og", "name": "Oganesson", "atomicNumber": 118, "atomicMass": 294.0, "kind": "Noble Gas", "state": "Gas", "period": 7, "group": 18, "electronegativity": None, "electronConfiguration": "1s2 2s2 2p6 3s2 3p6 3d10 4s2 4p6 4d10 4f14 5s2 5p6 5d10 5f14 6s2 6p6 6d10 7s2 7p6"},
]
