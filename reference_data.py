"""
Reference dataset used to seed the firearms table.

Each tuple follows the column order of `FIREARMS_COLUMNS`. The list is kept
exactly as catalogued, including the repeated Kalashnikov Saiga-12 entry,
which the UNIQUE(brand, name) constraint collapses into a single row.
"""

from models import FirearmSeed


FIREARMS_COLUMNS = (
    "brand", "name", "caliber", "type", "magazine_capacity", "effective_range",
    "year", "price", "manufacturer", "weight", "barrel_length", "action",
    "country_of_origin",
)

_RAW_FIREARMS = [
    ("Glock", "19", "9mm Parabellum", "Pistol", 15, 50, 1988, 550, "Glock GmbH", 0.67, 10.2, "Semi-Auto", "Austria"),
    ("Glock", "20", "10mm Auto", "Pistol", 15, 50, 1991, 620, "Glock GmbH", 0.79, 11.7, "Semi-Auto", "Austria"),
    ("Glock", "21", ".45 ACP", "Pistol", 13, 50, 1990, 600, "Glock GmbH", 0.83, 11.7, "Semi-Auto", "Austria"),
    ("H&K", "MP7", "4.6x30mm", "Submachine Gun", 20, 200, 2001, 1700, "Heckler & Koch", 1.9, 18.0, "Select-Fire", "Germany"),
    ("H&K", "MP5", "9mm Parabellum", "Submachine Gun", 30, 200, 1966, 2000, "Heckler & Koch", 2.5, 22.5, "Select-Fire", "Germany"),
    ("H&K", "UMP", ".45 ACP", "Submachine Gun", 25, 100, 1999, 1800, "Heckler & Koch", 2.3, 20.0, "Select-Fire", "Germany"),
    ("H&K", "G36", "5.56x45mm NATO", "Rifle", 30, 600, 1997, 2500, "Heckler & Koch", 3.6, 48.0, "Select-Fire", "Germany"),
    ("H&K", "HK416", "5.56x45mm NATO", "Rifle", 30, 600, 2004, 2700, "Heckler & Koch", 3.4, 36.8, "Select-Fire", "Germany"),
    ("SIG Sauer", "P220", ".45 ACP", "Pistol", 8, 50, 1975, 700, "SIG Sauer", 0.86, 11.2, "Semi-Auto", "Switzerland"),
    ("SIG Sauer", "P226", "9mm Parabellum", "Pistol", 15, 50, 1984, 750, "SIG Sauer", 0.96, 11.2, "Semi-Auto", "Switzerland"),
    ("SIG Sauer", "MPX", "9mm Parabellum", "Submachine Gun", 30, 100, 2013, 1900, "SIG Sauer", 2.7, 20.3, "Select-Fire", "United States"),
    ("Kriss", "Vector", ".45 ACP", "Submachine Gun", 25, 100, 2009, 2200, "Kriss USA", 2.7, 14.0, "Select-Fire", "United States"),
    ("Colt", "1911", ".45 ACP", "Pistol", 7, 50, 1911, 900, "Colt Manufacturing", 1.1, 12.7, "Semi-Auto", "United States"),
    ("Colt", "Anaconda", ".44 Magnum", "Revolver", 6, 100, 1990, 1200, "Colt Manufacturing", 1.5, 15.2, "Double-Action", "United States"),
    ("Colt", "Python", ".357 Magnum", "Revolver", 6, 100, 1955, 1300, "Colt Manufacturing", 1.2, 10.2, "Double-Action", "United States"),
    ("Colt", "AR-15", "5.56x45mm NATO", "Rifle", 30, 600, 1964, 1000, "Colt Manufacturing", 3.2, 50.8, "Semi-Auto", "United States"),
    ("ArmaLite", "AR-19", "9mm Parabellum", "Rifle", 32, 200, 2020, 1500, "ArmaLite", 3.0, 40.6, "Semi-Auto", "United States"),
    ("Kalashnikov", "AK-47", "7.62x39mm", "Rifle", 30, 350, 1949, 800, "Kalashnikov Concern", 4.3, 41.5, "Select-Fire", "Russia"),
    ("Kalashnikov", "AKM", "7.62x39mm", "Rifle", 30, 350, 1959, 850, "Kalashnikov Concern", 3.1, 41.5, "Select-Fire", "Russia"),
    ("Smith & Wesson", "M&P Shield", "9mm Parabellum", "Pistol", 8, 50, 2012, 600, "Smith & Wesson", 0.58, 7.9, "Semi-Auto", "United States"),
    ("Smith & Wesson", "Model 686", ".357 Magnum", "Revolver", 6, 100, 1980, 1000, "Smith & Wesson", 1.3, 10.2, "Double-Action", "United States"),
    ("Smith & Wesson", "M&P15", "5.56x45mm NATO", "Rifle", 30, 600, 2006, 1200, "Smith & Wesson", 3.2, 40.6, "Semi-Auto", "United States"),
    ("Springfield", "Enhanced 1911", ".45 ACP", "Pistol", 7, 50, 1985, 1100, "Springfield Armory", 1.1, 12.7, "Semi-Auto", "United States"),
    ("Springfield", "M1A", "7.62x51mm NATO", "Rifle", 20, 800, 1974, 1800, "Springfield Armory", 4.2, 55.9, "Semi-Auto", "United States"),
    ("Springfield", "XD-M", "9mm Parabellum", "Pistol", 19, 50, 2008, 700, "Springfield Armory", 0.88, 11.7, "Semi-Auto", "United States"),
    ("Beretta", "92FS", "9mm Parabellum", "Pistol", 15, 50, 1976, 800, "Beretta", 0.95, 12.5, "Semi-Auto", "Italy"),
    ("Beretta", "M9A4", "9mm Parabellum", "Pistol", 17, 50, 2021, 900, "Beretta", 0.94, 12.5, "Semi-Auto", "Italy"),
    ("Beretta", "APX", "9mm Parabellum", "Pistol", 17, 50, 2017, 650, "Beretta", 0.80, 10.8, "Semi-Auto", "Italy"),
    ("Benelli", "M4", "12 Gauge", "Shotgun", 7, 50, 1998, 1600, "Benelli Armi", 3.8, 47.0, "Semi-Auto", "Italy"),
    ("Benelli", "Super Black Eagle 3", "12 Gauge", "Shotgun", 4, 50, 2017, 2000, "Benelli Armi", 3.3, 71.1, "Semi-Auto", "Italy"),
    ("Benelli", "Nova", "12 Gauge", "Shotgun", 4, 50, 1999, 900, "Benelli Armi", 3.6, 66.0, "Pump-Action", "Italy"),
    ("KBP", "PP-2000", "9mm Parabellum", "Submachine Gun", 20, 100, 2006, 1400, "KBP Instrument Design Bureau", 1.4, 18.2, "Select-Fire", "Russia"),
    ("Izhmash", "PP-19 Bizon", "9x18mm Makarov", "Submachine Gun", 64, 100, 1996, 1500, "Izhmash", 2.1, 22.5, "Select-Fire", "Russia"),
    ("Nagant", "M1895", "7.62x38mmR", "Revolver", 7, 50, 1895, 500, "Tula Arsenal", 0.8, 11.4, "Double-Action", "Russia"),
    ("Izhmash", "PP-19-01 Vityaz-SN", "9mm Parabellum", "Submachine Gun", 30, 200, 2004, 1600, "Izhmash", 2.9, 23.7, "Select-Fire", "Russia"),
    ("Kalashnikov", "PPK-20", "9mm Parabellum", "Submachine Gun", 30, 200, 2020, 1800, "Kalashnikov Concern", 2.7, 23.7, "Select-Fire", "Russia"),
    ("Kalashnikov", "Saiga-9", "9mm Parabellum", "Carbine", 10, 200, 2010, 1200, "Kalashnikov Concern", 3.2, 34.5, "Semi-Auto", "Russia"),
    ("Yarygin", "MP-443 Grach", "9mm Parabellum", "Pistol", 17, 50, 2003, 600, "Izhevsk Mechanical Plant", 0.95, 11.2, "Semi-Auto", "Russia"),
    ("Izhmash", "Makarov PM", "9x18mm Makarov", "Pistol", 8, 50, 1951, 400, "Izhmash", 0.73, 9.3, "Semi-Auto", "Russia"),
    ("Izhmash", "PSM", "5.45x18mm", "Pistol", 8, 50, 1973, 450, "Izhmash", 0.46, 8.5, "Semi-Auto", "Russia"),
    ("FN", "Five-seveN", "5.7x28mm", "Pistol", 20, 50, 2000, 1100, "FN Herstal", 0.62, 12.2, "Semi-Auto", "Belgium"),
    ("FN", "SCAR-L", "5.56x45mm NATO", "Rifle", 30, 600, 2009, 2500, "FN Herstal", 3.3, 35.1, "Select-Fire", "Belgium"),
    ("FN", "P90", "5.7x28mm", "Submachine Gun", 50, 200, 1990, 2000, "FN Herstal", 2.6, 26.3, "Select-Fire", "Belgium"),
    ("FN", "FAL", "7.62x51mm NATO", "Rifle", 20, 800, 1953, 1500, "FN Herstal", 4.3, 53.3, "Select-Fire", "Belgium"),
    ("Kalashnikov", "Saiga-12", "12 Gauge", "Shotgun", 8, 50, 1997, 1000, "Kalashnikov Concern", 3.6, 43.0, "Semi-Auto", "Russia"),
    ("Kalashnikov", "Saiga-410", ".410 Bore", "Shotgun", 8, 50, 1997, 900, "Kalashnikov Concern", 3.4, 43.0, "Semi-Auto", "Russia"),
    ("Kalashnikov", "Saiga-20", "20 Gauge", "Shotgun", 8, 50, 1997, 950, "Kalashnikov Concern", 3.5, 43.0, "Semi-Auto", "Russia"),
    ("Molot", "Vepr-12", "12 Gauge", "Shotgun", 8, 50, 2003, 1100, "Molot-Oruzhie", 3.9, 43.0, "Semi-Auto", "Russia"),
    ("Kalashnikov", "Saiga-12", "12 Gauge", "Shotgun", 8, 50, 1997, 1000, "Kalashnikov Concern", 3.6, 43.0, "Semi-Auto", "Russia"),
    ("Degtyarev", "RPG-7", "40mm Rocket", "Rocket Launcher", 1, 300, 1961, 2500, "Bazalt", 7.0, 95.0, "Single-Shot", "Russia"),
    ("Raytheon", "FGM-148 Javelin", "127mm Missile", "Missile Launcher", 1, 2500, 1996, 25000, "Raytheon/Lockheed Martin", 22.3, 110.0, "Single-Shot", "United States"),
    ("Lockheed Martin", "Predator SRAW", "140mm Missile", "Missile Launcher", 1, 600, 2002, 15000, "Lockheed Martin", 9.8, 100.0, "Single-Shot", "United States"),
    ("Saab", "AT4", "84mm Rocket", "Rocket Launcher", 1, 300, 1987, 2000, "Saab Bofors Dynamics", 6.7, 100.0, "Single-Shot", "Sweden"),
    ("Colt", "M4 Carbine", "5.56x45mm NATO", "Rifle", 30, 500, 1994, 2000, "Colt Manufacturing", 2.9, 36.8, "Select-Fire", "United States"),
    ("Tula", "PPSh-41", "7.62x25mm Tokarev", "Submachine Gun", 71, 200, 1941, 600, "Tula Arsenal", 3.6, 26.9, "Select-Fire", "Russia"),
    ("Erma", "MP40", "9mm Parabellum", "Submachine Gun", 32, 100, 1940, 700, "Erma Werke", 4.0, 25.1, "Select-Fire", "Germany"),
    ("Mauser", "MG42", "7.92x57mm Mauser", "Machine Gun", 250, 1000, 1942, 3000, "Mauser Werke", 11.6, 53.0, "Full-Auto", "Germany"),
    ("Browning", "M1919", "7.62x51mm NATO", "Machine Gun", 250, 1000, 1919, 2500, "Browning Arms", 14.0, 61.0, "Full-Auto", "United States"),
    ("General Electric", "M134D Minigun", "7.62x51mm NATO", "Rotary Machine Gun", 4000, 1000, 1960, 50000, "General Electric", 38.0, 55.9, "Full-Auto", "United States"),
    ("Ruger", "10/22", ".22 LR", "Rifle", 10, 100, 1964, 300, "Sturm, Ruger & Co.", 2.3, 47.0, "Semi-Auto", "United States"),
    ("Ruger", "Mini-14", "5.56x45mm NATO", "Rifle", 20, 400, 1973, 900, "Sturm, Ruger & Co.", 2.9, 47.0, "Semi-Auto", "United States"),
    ("Remington", "870", "12 Gauge", "Shotgun", 7, 50, 1950, 500, "Remington Arms", 3.6, 71.1, "Pump-Action", "United States"),
    ("Remington", "700", ".308 Winchester", "Rifle", 4, 800, 1962, 800, "Remington Arms", 3.4, 61.0, "Bolt-Action", "United States"),
    ("Winchester", "Model 70", ".30-06 Springfield", "RifleΙ", 5, 800, 1936, 1000, "Winchester Repeating Arms", 3.6, 61.0, "Bolt-Action", "United States"),
    ("CZ", "CZ 75", "9mm Parabellum", "Pistol", 16, 50, 1975, 700, "Česká zbrojovka", 1.0, 12.0, "Semi-Auto", "Czech Republic"),
    ("IWI", "Tavor X95", "5.56x45mm NATO", "Rifle", 30, 500, 2009, 2200, "Israel Weapon Industries", 3.3, 33.0, "Select-Fire", "Israel"),
    ("Steyr", "AUG", "5.56x45mm NATO", "Rifle", 30, 600, 1977, 2100, "Steyr Mannlicher", 3.6, 50.8, "Select-Fire", "Austria"),
    ("Mossberg", "500", "12 Gauge", "Shotgun", 6, 50, 1960, 450, "O.F. Mossberg & Sons", 3.4, 71.1, "Pump-Action", "United States"),
    ("Magnum Research", "Desert Eagle", ".50 AE", "Pistol", 7, 50, 1983, 1500, "Magnum Research", 2.0, 15.2, "Semi-Auto", "United States"),
    ("Beretta", "93R", "9mm Parabellum", "Pistol", 20, 50, 1979, 1200, "Beretta", 1.2, 12.5, "Select-Fire", "Italy"),
    ("H&K", "USP", "9mm Parabellum", "Pistol", 15, 50, 1993, 800, "Heckler & Koch", 0.79, 10.8, "Semi-Auto", "Germany"),
    ("SIG Sauer", "P250", "9mm Parabellum", "Pistol", 17, 50, 2007, 650, "SIG Sauer", 0.82, 10.8, "Semi-Auto", "United States"),
    ("GIAT", "FAMAS", "5.56x45mm NATO", "Rifle", 25, 450, 1978, 2200, "Nexter Systems", 3.6, 48.8, "Select-Fire", "France"),
    ("Accuracy International", "AWP", "7.62x51mm NATO", "Sniper Rifle", 10, 800, 1997, 3000, "Accuracy International", 6.5, 61.0, "Bolt-Action", "United Kingdom"),
    ("SIG Sauer", "SG553", "5.56x45mm NATO", "Rifle", 30, 400, 2009, 2300, "Swiss Arms", 3.2, 34.7, "Select-Fire", "Switzerland"),
]

FIREARMS: list[FirearmSeed] = [
    FirearmSeed(**dict(zip(FIREARMS_COLUMNS, row))) for row in _RAW_FIREARMS
]
