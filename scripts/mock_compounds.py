import json
from pathlib import Path

import numpy as np

rng = np.random.default_rng(7)
n_compounds = 4000

types = ["Sulfide", "Oxide", "Phosphate", "Selenide", "Nitride", "Fluoride", "Chloride", "Silicate"]
anions = {
    "Sulfide": "S", "Oxide": "O", "Phosphate": "PO4", "Selenide": "Se",
    "Nitride": "N", "Fluoride": "F", "Chloride": "Cl", "Silicate": "SiO4",
}
crystal_systems = ["cubic", "hexagonal", "tetragonal", "orthorhombic", "monoclinic", "trigonal"]
space_groups = ["P-3m1", "Fm-3m", "R-3m", "I41/amd", "Pnma", "C2/m", "P63/mmc"]
dopants = ["", "V", "Nb", "Mn", "Fe", "Co", "Cr"]

records = []
for i in range(n_compounds):
    mat_type = rng.choice(types)
    n_ti = int(rng.integers(1, 3))
    n_x = int(rng.integers(1, 4))
    base = f"Li{'Ti' if n_ti == 1 else f'Ti{n_ti}'}{anions[mat_type]}{'' if n_x == 1 else n_x}"
    dopant = rng.choice(dopants)
    formula = base if not dopant else f"{base}:{dopant}"

    voltage = float(np.clip(rng.normal(3.4, 0.5), 0.5, 5.0))
    capacity = float(np.clip(rng.normal(250, 45), 80, 420))
    energy = float(np.clip(voltage * capacity * rng.normal(1.1, 0.1) * 3, 200, 5000))
    conductivity = float(10 ** rng.uniform(-7, 2.5))

    records.append(
        {
            "id": i + 1,
            "formula": formula,
            "base_formula": base,
            "type": str(mat_type),
            "space_group": str(rng.choice(space_groups)),
            "crystal_system": str(rng.choice(crystal_systems)),
            "li_content": round(float(rng.uniform(0.2, 2.0)), 3),
            "ti_content": round(float(rng.uniform(0.05, 0.5)), 3),
            "voltage": round(voltage, 3),
            "capacity": round(capacity, 2),
            "energy_gravimetric": round(energy, 1),
            "energy_volumetric": round(energy * float(rng.uniform(2.0, 4.5)), 1),
            "conductivity": conductivity,
            "overpotential": round(float(rng.uniform(0.01, 0.4)), 4),
            "cycle_life": int(rng.integers(1000, 65000)),
            "stability": round(float(rng.uniform(0.5, 1.0)), 4),
            "volume_expansion": round(float(rng.uniform(0.5, 25.0)), 3),
            "rate_capability": round(float(rng.uniform(50, 99)), 2),
            "coulombic_efficiency": round(float(rng.uniform(90, 99.9)), 3),
            "bandgap": round(float(rng.uniform(0.0, 4.5)), 4),
            "density": round(float(rng.uniform(2.0, 6.0)), 3),
            "elastic_modulus": round(float(rng.uniform(40, 300)), 2),
        }
    )

Path("data").mkdir(exist_ok=True)
with open("data/compounds_data.json", "w", encoding="utf-8") as f:
    json.dump(records, f)
print("wrote data/compounds_data.json", len(records))
