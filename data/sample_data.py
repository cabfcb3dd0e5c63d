"""Generate a synthetic trip dataset for the Trip Rooming & Bus Seating Planner."""

import os
import random

import pandas as pd

FIRST_NAMES = [
    "Mario", "Giulia", "Luca", "Francesca", "Marco", "Chiara", "Paolo", "Elena",
    "Giorgio", "Sara", "Andrea", "Laura", "Stefano", "Anna", "Davide", "Silvia",
]
SURNAMES = [
    "Rossi", "Bianchi", "Esposito", "Ricci", "Marino", "Greco", "Bruno", "Gallo",
    "Conti", "De Luca", "Costa", "Giordano", "Mancini", "Rizzo", "Lombardi", "Moretti",
    "Èrcoli", "D'Amico",
]
PLACES = ["Roma", "Napoli", "Milano", "Torino", "Bari", "Palermo", "Firenze", "Bologna"]

# (group number, room type, size); None = travelling alone
GROUP_PLAN = [
    (1, "doppia", 2), (2, "matrimoniale", 2), (3, "tripla", 3), (4, "doppia", 5),
    (5, "quadrupla", 4), (6, "singola", 1), (7, "doppia", 2), (7, "singola", 1),
    (8, "tripla", 4), (None, "singola", 1), (None, "doppia", 1), (None, "singola", 1),
]


def generate_participants_df() -> pd.DataFrame:
    """Participants of one trip, grouped into travel groups with a room type."""
    random.seed(42)
    rows = []
    pid = 1
    for group, room_type, size in GROUP_PLAN:
        family = random.choice(SURNAMES)
        for _ in range(size):
            surname = family if random.random() < 0.6 else random.choice(SURNAMES)
            rows.append({
                "ID": f"P{pid:03d}",
                "Full Name": f"{random.choice(FIRST_NAMES)} {surname}",
                "Group Number": group,
                "Room Type": room_type,
                "Date of Birth": f"{random.randint(1, 28):02d}/{random.randint(1, 12):02d}/{random.randint(1945, 2005)}",
                "Place of Birth": random.choice(PLACES),
                "Phone": f"+39 3{random.randint(10, 49)} {random.randint(1000000, 9999999)}",
            })
            pid += 1
    return pd.DataFrame(rows)


def generate_trip_df() -> pd.DataFrame:
    return pd.DataFrame([{
        "Trip ID": "T2026-014",
        "Title": "Tour della Puglia",
        "Destination": "Alberobello, Lecce, Otranto",
        "Departure Date": "12/06/2026",
        "Return Date": "16/06/2026",
        "Companion": "Rosa Ferri",
    }])


def generate_bus_df() -> pd.DataFrame:
    return pd.DataFrame([{
        "Name": "GT 49 posti",
        "Rows": 12,
        "Seats per Row": 4,
        "Last Row Seats": 5,
        "Layout Type": "gt_standard",
        "Has WC": False,
    }])


def generate_seats_df(participants_df: pd.DataFrame) -> pd.DataFrame:
    """Seat the first members of the trip in order, leaving the rest unassigned."""
    ids = participants_df["ID"].tolist()[:12]
    return pd.DataFrame([{"Seat Number": i + 1, "Participant ID": pid} for i, pid in enumerate(ids)])


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    participants = generate_participants_df()
    participants.to_csv(os.path.join(output_dir, "participants.csv"), index=False)
    generate_trip_df().to_csv(os.path.join(output_dir, "trip.csv"), index=False)
    generate_bus_df().to_csv(os.path.join(output_dir, "bus.csv"), index=False)
    generate_seats_df(participants).to_csv(os.path.join(output_dir, "seats.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single multi-tab Excel file with all datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_trip.xlsx")
    participants = generate_participants_df()
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        participants.to_excel(writer, sheet_name="Participants", index=False)
        generate_trip_df().to_excel(writer, sheet_name="Trip", index=False)
        generate_bus_df().to_excel(writer, sheet_name="Bus", index=False)
        generate_seats_df(participants).to_excel(writer, sheet_name="Seats", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
