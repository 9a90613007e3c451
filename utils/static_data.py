# Bundled fallback data, used only when every live endpoint fails (or offline).
# Limited subset in the canonical record shape; extend as needed.
FALLBACK_COUNTRIES = [
    {
        "name": "United States",
        "alpha2Code": "US",
        "alpha3Code": "USA",
        "capital": "Washington, D.C.",
        "region": "Americas",
        "subregion": "North America",
        "population": 329484123,
        "area": 9372610,
        "flagUrl": "https://flagcdn.com/w320/us.png",
        "languages": [{"name": "English"}],
        "currencies": [{"name": "United States dollar", "symbol": "$"}],
        "borders": ["CAN", "MEX"],
    },
    {
        "name": "Canada",
        "alpha2Code": "CA",
        "alpha3Code": "CAN",
        "capital": "Ottawa",
        "region": "Americas",
        "subregion": "North America",
        "population": 38005238,
        "area": 9984670,
        "flagUrl": "https://flagcdn.com/w320/ca.png",
        "languages": [{"name": "English"}, {"name": "French"}],
        "currencies": [{"name": "Canadian dollar", "symbol": "$"}],
        "borders": ["USA"],
    },
    {
        "name": "Mexico",
        "alpha2Code": "MX",
        "alpha3Code": "MEX",
        "capital": "Mexico City",
        "region": "Americas",
        "subregion": "North America",
        "population": 128932753,
        "area": 1964375,
        "flagUrl": "https://flagcdn.com/w320/mx.png",
        "languages": [{"name": "Spanish"}],
        "currencies": [{"name": "Mexican peso", "symbol": "$"}],
        "borders": ["BLZ", "GTM", "USA"],
    },
    {
        "name": "Brazil",
        "alpha2Code": "BR",
        "alpha3Code": "BRA",
        "capital": "Brasília",
        "region": "Americas",
        "subregion": "South America",
        "population": 212559409,
        "area": 8515767,
        "flagUrl": "https://flagcdn.com/w320/br.png",
        "languages": [{"name": "Portuguese"}],
        "currencies": [{"name": "Brazilian real", "symbol": "R$"}],
        "borders": ["ARG", "BOL", "COL", "GUF", "GUY", "PRY", "PER", "SUR", "URY", "VEN"],
    },
    {
        "name": "United Kingdom",
        "alpha2Code": "GB",
        "alpha3Code": "GBR",
        "capital": "London",
        "region": "Europe",
        "subregion": "Northern Europe",
        "population": 67215293,
        "area": 242900,
        "flagUrl": "https://flagcdn.com/w320/gb.png",
        "languages": [{"name": "English"}],
        "currencies": [{"name": "British pound", "symbol": "£"}],
        "borders": ["IRL"],
    },
    {
        "name": "France",
        "alpha2Code": "FR",
        "alpha3Code": "FRA",
        "capital": "Paris",
        "region": "Europe",
        "subregion": "Western Europe",
        "population": 67391582,
        "area": 551695,
        "flagUrl": "https://flagcdn.com/w320/fr.png",
        "languages": [{"name": "French"}],
        "currencies": [{"name": "Euro", "symbol": "€"}],
        "borders": ["AND", "BEL", "DEU", "ITA", "LUX", "MCO", "ESP", "CHE"],
    },
    {
        "name": "Germany",
        "alpha2Code": "DE",
        "alpha3Code": "DEU",
        "capital": "Berlin",
        "region": "Europe",
        "subregion": "Western Europe",
        "population": 83240525,
        "area": 357114,
        "flagUrl": "https://flagcdn.com/w320/de.png",
        "languages": [{"name": "German"}],
        "currencies": [{"name": "Euro", "symbol": "€"}],
        "borders": ["AUT", "BEL", "CZE", "DNK", "FRA", "LUX", "NLD", "POL", "CHE"],
    },
    {
        "name": "India",
        "alpha2Code": "IN",
        "alpha3Code": "IND",
        "capital": "New Delhi",
        "region": "Asia",
        "subregion": "Southern Asia",
        "population": 1380004385,
        "area": 3287590,
        "flagUrl": "https://flagcdn.com/w320/in.png",
        "languages": [{"name": "Hindi"}, {"name": "English"}],
        "currencies": [{"name": "Indian rupee", "symbol": "₹"}],
        "borders": ["BGD", "BTN", "MMR", "CHN", "NPL", "PAK"],
    },
    {
        "name": "Japan",
        "alpha2Code": "JP",
        "alpha3Code": "JPN",
        "capital": "Tokyo",
        "region": "Asia",
        "subregion": "Eastern Asia",
        "population": 125836021,
        "area": 377930,
        "flagUrl": "https://flagcdn.com/w320/jp.png",
        "languages": [{"name": "Japanese"}],
        "currencies": [{"name": "Japanese yen", "symbol": "¥"}],
        "borders": [],
    },
    {
        "name": "South Africa",
        "alpha2Code": "ZA",
        "alpha3Code": "ZAF",
        "capital": "Pretoria",
        "region": "Africa",
        "subregion": "Southern Africa",
        "population": 59308690,
        "area": 1221037,
        "flagUrl": "https://flagcdn.com/w320/za.png",
        "languages": [{"name": "Afrikaans"}, {"name": "English"}, {"name": "Zulu"}],
        "currencies": [{"name": "South African rand", "symbol": "R"}],
        "borders": ["BWA", "LSO", "MOZ", "NAM", "SWZ", "ZWE"],
    },
    {
        "name": "Nigeria",
        "alpha2Code": "NG",
        "alpha3Code": "NGA",
        "capital": "Abuja",
        "region": "Africa",
        "subregion": "Western Africa",
        "population": 206139587,
        "area": 923768,
        "flagUrl": "https://flagcdn.com/w320/ng.png",
        "languages": [{"name": "English"}],
        "currencies": [{"name": "Nigerian naira", "symbol": "₦"}],
        "borders": ["BEN", "CMR", "TCD", "NER"],
    },
    {
        "name": "Australia",
        "alpha2Code": "AU",
        "alpha3Code": "AUS",
        "capital": "Canberra",
        "region": "Oceania",
        "subregion": "Australia and New Zealand",
        "population": 25687041,
        "area": 7692024,
        "flagUrl": "https://flagcdn.com/w320/au.png",
        "languages": [{"name": "English"}],
        "currencies": [{"name": "Australian dollar", "symbol": "$"}],
        "borders": [],
    },
]
