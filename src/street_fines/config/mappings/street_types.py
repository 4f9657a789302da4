# Directions a street may end with.
# "NS" shows up in a handful of records, presumably for "north or south".
DIRECTIONS = frozenset({
    'N', 'NORTH',
    'S', 'SOUTH',
    'W', 'WEST',
    'E', 'EAST',
    'NE', 'NW', 'SW', 'SE',
    'NS',
})

# Street designations trimmed from the end of a street name.
# Mostly the most frequent last tokens of the address column, e.g.
#   cut -d, -f8 Parking_Tags_Data_2012.csv | awk '{print $NF}' | sort | uniq -c | sort -n
# Designations are not normalized ("YONGE BLVD" and "YONGE ST" both become "YONGE").
DESIGNATIONS = frozenset({
    # Avenue
    'AV', 'AVE', 'AVENUE',

    # Boulevard
    'BL', 'BLV', 'BLVD', 'BOULEVARD',

    # Circle / Crescent / Court
    'CIR', 'CIRCLE', 'CR', 'CRCL', 'CRCT',
    'CRES', 'CRS', 'CRST', 'CRESCENT',
    'CT', 'CRT', 'COURT',

    # Drive
    'D', 'DR', 'DRIVE',

    # Gate / Garden / Grove
    'GATE', 'GT',
    'GARDEN', 'GDN', 'GDNS', 'GARDENS', 'GRDNS',
    'GR', 'GROVE', 'GRV',

    # Heights / Hill
    'HGHTS', 'HEIGHTS', 'HTS',
    'HILL',

    # Lane
    'LN', 'LANE',

    # Manor / Mews
    'MANOR', 'MEWS',

    # Park / Parkway
    'PARKWAY', 'PK', 'PKWY', 'PRK',

    # Place / Promenade
    'PL', 'PLCE', 'PLACE', 'PROMENADE',

    # Quay
    'QUAY',

    # Road
    'RD', 'ROAD',

    # Street / Square
    'ST', 'STR', 'STREET',
    'SQ', 'SQUARE',

    # Terrace / Trail
    'T', 'TER', 'TERR', 'TERRACE',
    'TR', 'TRL', 'TRAIL',

    # Vista / Way / Wood
    'VISTA', 'V',
    'WAY', 'WY',
    'WOOD',
})
