"""Region table: URL region key -> raw ``county`` values found on facility rows.

Facility rows carry whatever county string the import produced (a ceremonial
county, a town, a historic county). Each row below lists every raw string that
belongs under one region page. A raw string may appear under one region only;
``RegionMapping`` refuses to load the table otherwise.

Entries are ``(key, display name, country, raw county strings)``.
"""

from __future__ import annotations

ENGLAND = "England"
SCOTLAND = "Scotland"
WALES = "Wales"
NORTHERN_IRELAND = "Northern Ireland"

COUNTRIES: tuple[str, ...] = (ENGLAND, SCOTLAND, WALES, NORTHERN_IRELAND)

RegionEntry = tuple[str, str, str, tuple[str, ...]]

REGIONS: tuple[RegionEntry, ...] = (
    # England
    ("dorset", "Dorset", ENGLAND, ("Poole", "Bournemouth", "Dorset", "Wareham", "Weymouth", "Blandford Forum")),
    (
        "greater-manchester",
        "Greater Manchester",
        ENGLAND,
        ("Greater Manchester", "Manchester", "Oldham", "Stockport", "Salford", "Bury"),
    ),
    (
        "devon",
        "Devon",
        ENGLAND,
        (
            "Devon",
            "Plymouth",
            "Exeter",
            "Torpoint",
            "Totnes",
            "Newton Abbot",
            "Cullompton",
            "Exmouth",
            "Dawlish",
            "Brixham",
            "Honiton",
        ),
    ),
    ("norfolk", "Norfolk", ENGLAND, ("Norfolk", "Norwich", "Wells-next-the-Sea", "Dereham")),
    ("bristol", "Bristol", ENGLAND, ("Bristol",)),
    (
        "east-sussex",
        "East Sussex",
        ENGLAND,
        ("East Sussex", "Brighton", "Eastbourne", "Bexhill-on-Sea", "Hastings", "Lewes"),
    ),
    ("greater-london", "Greater London", ENGLAND, ("Greater London", "London", "Enfield")),
    (
        "west-yorkshire",
        "West Yorkshire",
        ENGLAND,
        ("West Yorkshire", "Leeds", "Bradford", "Wakefield", "Brighouse", "Hebden Bridge", "Keighley", "Shipley"),
    ),
    ("nottinghamshire", "Nottinghamshire", ENGLAND, ("Nottingham", "Mansfield", "Worksop")),
    ("north-yorkshire", "North Yorkshire", ENGLAND, ("York", "Harrogate", "Malton", "Ripon", "Skipton")),
    ("east-riding-of-yorkshire", "East Riding of Yorkshire", ENGLAND, ("Hull", "Bridlington")),
    (
        "cornwall",
        "Cornwall",
        ENGLAND,
        (
            "Cornwall",
            "Falmouth",
            "Penzance",
            "Newquay",
            "Saint Austell",
            "Saint Columb",
            "Redruth",
            "Camborne",
            "Hayle",
            "Wadebridge",
            "Camelford",
            "Bude",
        ),
    ),
    ("west-midlands", "West Midlands", ENGLAND, ("Wolverhampton", "Stourbridge")),
    ("cambridgeshire", "Cambridgeshire", ENGLAND, ("Cambridge", "ELY", "Peterborough")),
    (
        "hampshire",
        "Hampshire",
        ENGLAND,
        (
            "Portsmouth",
            "Hampshire",
            "Southampton",
            "Basingstoke",
            "Andover",
            "Petersfield",
            "Liphook",
            "New Milton",
            "Lymington",
            "Lee-on-the-Solent",
            "Hook",
            "Farnborough",
        ),
    ),
    (
        "somerset",
        "Somerset",
        ENGLAND,
        (
            "Somerset",
            "Bath",
            "Taunton",
            "Wellington",
            "Yeovil",
            "Bruton",
            "Shepton Mallet",
            "Radstock",
            "Weston-super-Mare",
        ),
    ),
    (
        "kent",
        "Kent",
        ENGLAND,
        (
            "Deal",
            "Dover",
            "Faversham",
            "Folkestone",
            "Maidstone",
            "Margate",
            "Rochester",
            "Sandwich",
            "Tunbridge Wells",
            "Whitstable",
        ),
    ),
    (
        "essex",
        "Essex",
        ENGLAND,
        ("Brentwood", "Chelmsford", "Hockley", "Leigh-on-Sea", "Loughton", "Romford", "Southend-on-Sea"),
    ),
    ("lancashire", "Lancashire", ENGLAND, ("Preston", "Blackpool")),
    ("cumbria", "Cumbria", ENGLAND, ("Cumbria", "Keswick", "Penrith", "Workington")),
    ("derbyshire", "Derbyshire", ENGLAND, ("Derbyshire", "Derby", "Chesterfield", "Dronfield", "Matlock")),
    ("lincolnshire", "Lincolnshire", ENGLAND, ("Lincoln", "Boston", "Market Rasen", "Skegness", "Sleaford")),
    ("oxfordshire", "Oxfordshire", ENGLAND, ("Oxford", "Oxfordshire", "Abingdon", "Didcot", "Thame")),
    (
        "gloucestershire",
        "Gloucestershire",
        ENGLAND,
        ("Gloucestershire", "Gloucester", "Stroud", "Tewkesbury", "Lydney"),
    ),
    ("buckinghamshire", "Buckinghamshire", ENGLAND, ("Buckinghamshire", "High Wycombe", "Great Missenden")),
    (
        "berkshire",
        "Berkshire",
        ENGLAND,
        ("Reading", "Ascot", "Bracknell", "Newbury", "Slough", "Windsor", "Wokingham"),
    ),
    ("wiltshire", "Wiltshire", ENGLAND, ("Swindon", "Calne", "Melksham", "Salisbury", "Trowbridge")),
    ("surrey", "Surrey", ENGLAND, ("Guildford", "Woking", "Farnham", "West Byfleet")),
    (
        "west-sussex",
        "West Sussex",
        ENGLAND,
        (
            "West Sussex",
            "Chichester",
            "Horsham",
            "Crawley",
            "Hassocks",
            "Haywards Heath",
            "Lancing",
            "Littlehampton",
            "Pulborough",
            "Shoreham-by-Sea",
        ),
    ),
    ("suffolk", "Suffolk", ENGLAND, ("Bungay", "Saxmundham", "Woodbridge")),
    ("worcestershire", "Worcestershire", ENGLAND, ("Worcester", "Kidderminster")),
    ("staffordshire", "Staffordshire", ENGLAND, ("Cannock", "Rugeley", "Stoke-on-Trent")),
    ("cheshire", "Cheshire", ENGLAND, ("Cheshire", "Cheadle", "Congleton", "Crewe", "Tarporley")),
    (
        "tyne-and-wear",
        "Tyne and Wear",
        ENGLAND,
        ("Tyne and Wear", "Newcastle upon Tyne", "Gateshead", "North Shields"),
    ),
    (
        "south-yorkshire",
        "South Yorkshire",
        ENGLAND,
        ("South Yorkshire", "Doncaster", "Rotherham", "Sheffield", "Barnsley"),
    ),
    ("bedfordshire", "Bedfordshire", ENGLAND, ("Bedford", "Luton", "Shefford")),
    (
        "hertfordshire",
        "Hertfordshire",
        ENGLAND,
        (
            "St Albans",
            "Bishop Stortford",
            "Borehamwood",
            "Potters Bar",
            "Uxbridge",
            "Waltham Abbey",
            "West Drayton",
        ),
    ),
    ("northumberland", "Northumberland", ENGLAND, ("Hexham", "Chathill")),
    # Scotland
    ("aberdeenshire", "Aberdeenshire", SCOTLAND, ("Aberdeenshire", "Aberdeen", "Ballater", "Stonehaven")),
    ("glasgow-city", "Glasgow City", SCOTLAND, ("Glasgow",)),
    (
        "highland",
        "Highland",
        SCOTLAND,
        (
            "Highland",
            "Thurso",
            "Cromarty",
            "Portree",
            "Kingussie",
            "Nairn",
            "Dingwall",
            "Gairloch",
            "Invergarry",
            "Mallaig",
        ),
    ),
    ("moray", "Moray", SCOTLAND, ("Moray", "Forres")),
    ("stirling", "Stirling", SCOTLAND, ("Stirling", "Callander")),
    ("fife", "Fife", SCOTLAND, ("Cupar", "St Andrews")),
    ("perth-and-kinross", "Perth and Kinross", SCOTLAND, ("Perth", "Aberfeldy", "Crieff", "Dunkeld")),
    (
        "argyll-and-bute",
        "Argyll and Bute",
        SCOTLAND,
        ("Argyll and Bute", "Oban", "Arrochar", "Isle of Arran", "Isle of Mull"),
    ),
    ("dumfries-and-galloway", "Dumfries and Galloway", SCOTLAND, ("Dumfries", "Kirkcudbright", "Lockerbie")),
    ("scottish-borders", "Scottish Borders", SCOTLAND, ("Kelso",)),
    ("falkirk", "Falkirk", SCOTLAND, ("Falkirk",)),
    ("west-dunbartonshire", "West Dunbartonshire", SCOTLAND, ("Dumbarton",)),
    ("inverclyde", "Inverclyde", SCOTLAND, ("Inverclyde",)),
    ("shetland", "Shetland", SCOTLAND, ("Shetland", "Lerwick")),
    ("orkney", "Orkney", SCOTLAND, ("Orkney", "Stromness")),
    ("eilean-siar", "Eilean Siar", SCOTLAND, ("Stornoway", "Isle of Harris")),
    ("angus", "Angus", SCOTLAND, ("Dundee", "Arbroath")),
    ("east-lothian", "East Lothian", SCOTLAND, ("North Berwick",)),
    ("midlothian", "Midlothian", SCOTLAND, ("Edinburgh",)),
    ("north-ayrshire", "North Ayrshire", SCOTLAND, ("North Ayrshire", "Ardrossan")),
    ("east-ayrshire", "East Ayrshire", SCOTLAND, ("Strathaven",)),
    ("renfrewshire", "Renfrewshire", SCOTLAND, ("Paisley",)),
    # Wales
    ("swansea", "Swansea", WALES, ("Swansea",)),
    ("cardiff", "Cardiff", WALES, ("Cardiff",)),
    (
        "gwynedd",
        "Gwynedd",
        WALES,
        (
            "Gwynedd",
            "Caernarfon",
            "Bangor",
            "Beaumaris",
            "Blaenau Ffestiniog",
            "Criccieth",
            "Henfaes",
            "Holyhead",
            "Ty Croes",
        ),
    ),
    ("ceredigion", "Ceredigion", WALES, ("Ceredigion", "Machynlleth")),
    ("denbighshire", "Denbighshire", WALES, ("Denbighshire", "Colwyn Bay", "Llangollen")),
    ("flintshire", "Flintshire", WALES, ("Flint", "Flintshire")),
    ("pembrokeshire", "Pembrokeshire", WALES, ("Haverfordwest", "Kilgetty", "Milford Haven", "Saundersfoot")),
    ("carmarthenshire", "Carmarthenshire", WALES, ("Llanelli", "Llandysul")),
    ("vale-of-glamorgan", "Vale of Glamorgan", WALES, ("Vale of Glamorgan", "Porthcawl")),
    ("neath-port-talbot", "Neath Port Talbot", WALES, ("Port Talbot",)),
    ("powys", "Powys", WALES, ("Welshpool",)),
    ("wrexham", "Wrexham", WALES, ("Wrexham",)),
    ("monmouthshire", "Monmouthshire", WALES, ("Cwmbran",)),
    ("blaenau-gwent", "Blaenau Gwent", WALES, ("Blackwood",)),
    # Northern Ireland
    ("belfast", "Belfast", NORTHERN_IRELAND, ("Belfast", "Belfast, Antrim")),
    ("antrim", "Antrim", NORTHERN_IRELAND, ("Antrim", "Ballymena", "Carrickfergus")),
    ("armagh", "Armagh", NORTHERN_IRELAND, ("Craigavon",)),
    ("down", "Down", NORTHERN_IRELAND, ("Newry",)),
    ("fermanagh", "Fermanagh", NORTHERN_IRELAND, ("Enniskillen",)),
    ("londonderry", "Londonderry", NORTHERN_IRELAND, ("Coleraine", "Portstewart")),
    ("tyrone", "Tyrone", NORTHERN_IRELAND, ("Dungannon", "Omagh")),
)
