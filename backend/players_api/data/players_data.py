from datetime import date

# Argentina's starting eleven from the 2022 World Cup final.
SEED_PLAYERS: list[dict] = [
    {
        "id": 1,
        "first_name": "Damián",
        "middle_name": "Emiliano",
        "last_name": "Martínez",
        "date_of_birth": date(1992, 9, 2),
        "squad_number": 23,
        "position": "Goalkeeper",
        "abbr_position": "GK",
        "team": "Aston Villa FC",
        "league": "Premier League",
        "starting11": True,
    },
    {
        "id": 2,
        "first_name": "Nahuel",
        "middle_name": None,
        "last_name": "Molina",
        "date_of_birth": date(1998, 4, 6),
        "squad_number": 26,
        "position": "Right-Back",
        "abbr_position": "RB",
        "team": "Atlético Madrid",
        "league": "La Liga",
        "starting11": True,
    },
    {
        "id": 3,
        "first_name": "Cristian",
        "middle_name": "Gabriel",
        "last_name": "Romero",
        "date_of_birth": date(1998, 4, 27),
        "squad_number": 13,
        "position": "Centre-Back",
        "abbr_position": "CB",
        "team": "Tottenham Hotspur",
        "league": "Premier League",
        "starting11": True,
    },
    {
        "id": 4,
        "first_name": "Nicolás",
        "middle_name": "Hernán Gonzalo",
        "last_name": "Otamendi",
        "date_of_birth": date(1988, 2, 12),
        "squad_number": 19,
        "position": "Centre-Back",
        "abbr_position": "CB",
        "team": "SL Benfica",
        "league": "Liga Portugal",
        "starting11": True,
    },
    {
        "id": 5,
        "first_name": "Nicolás",
        "middle_name": "Alejandro",
        "last_name": "Tagliafico",
        "date_of_birth": date(1992, 8, 31),
        "squad_number": 3,
        "position": "Left-Back",
        "abbr_position": "LB",
        "team": "Olympique Lyon",
        "league": "Ligue 1",
        "starting11": True,
    },
    {
        "id": 6,
        "first_name": "Ángel",
        "middle_name": "Fabián",
        "last_name": "Di María",
        "date_of_birth": date(1988, 2, 14),
        "squad_number": 11,
        "position": "Right Winger",
        "abbr_position": "LW",
        "team": "SL Benfica",
        "league": "Liga Portugal",
        "starting11": True,
    },
    {
        "id": 7,
        "first_name": "Rodrigo",
        "middle_name": "Javier",
        "last_name": "de Paul",
        "date_of_birth": date(1994, 5, 24),
        "squad_number": 7,
        "position": "Central Midfield",
        "abbr_position": "CM",
        "team": "Atlético Madrid",
        "league": "La Liga",
        "starting11": True,
    },
    {
        "id": 8,
        "first_name": "Enzo",
        "middle_name": "Jeremías",
        "last_name": "Fernández",
        "date_of_birth": date(2001, 1, 17),
        "squad_number": 24,
        "position": "Central Midfield",
        "abbr_position": "CM",
        "team": "Chelsea FC",
        "league": "Premier League",
        "starting11": True,
    },
    {
        "id": 9,
        "first_name": "Alexis",
        "middle_name": None,
        "last_name": "Mac Allister",
        "date_of_birth": date(1998, 12, 24),
        "squad_number": 20,
        "position": "Central Midfield",
        "abbr_position": "CM",
        "team": "Liverpool FC",
        "league": "Premier League",
        "starting11": True,
    },
    {
        "id": 10,
        "first_name": "Lionel",
        "middle_name": "Andrés",
        "last_name": "Messi",
        "date_of_birth": date(1987, 6, 24),
        "squad_number": 10,
        "position": "Right Winger",
        "abbr_position": "RW",
        "team": "Inter Miami CF",
        "league": "Major League Soccer",
        "starting11": True,
    },
    {
        "id": 11,
        "first_name": "Julián",
        "middle_name": None,
        "last_name": "Álvarez",
        "date_of_birth": date(2000, 1, 31),
        "squad_number": 9,
        "position": "Centre-Forward",
        "abbr_position": "CF",
        "team": "Manchester City",
        "league": "Premier League",
        "starting11": True,
    },
]
