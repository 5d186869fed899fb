"""Identifiers of Kitten Game entities used as settings domain keys.

Every enumeration is closed: it lists the entities this release of the
settings schema knows about. The live game may add or retire entities
between versions; that drift is reported by the game-state validator,
never corrected automatically.

Uses StrEnum so members compare equal to (and hash like) the raw game
identifiers, which keeps legacy keys and JSON keys plain strings.
"""

from __future__ import annotations

from enum import StrEnum


class Technology(StrEnum):
    """Researchable technologies (``game.science.techs``)."""

    ACOUSTICS = "acoustics"
    ADV_EXOGEOLOGY = "advExogeology"
    AGRICULTURE = "agriculture"
    AI = "ai"
    ANIMAL = "animal"
    ANTIMATTER = "antimatter"
    ARCHEOLOGY = "archeology"
    ARCHERY = "archery"
    ARCHITECTURE = "architecture"
    ARTIFICIAL_GRAVITY = "artificialGravity"
    ASTRONOMY = "astronomy"
    BIOCHEMISTRY = "biochemistry"
    BIOLOGY = "biology"
    BLACKCHAIN = "blackchain"
    BREWERY = "brewery"
    CALENDAR = "calendar"
    CHEMISTRY = "chemistry"
    CHRONOPHYSICS = "chronophysics"
    CIVIL = "civil"
    COMBUSTION = "combustion"
    CONSTRUCTION = "construction"
    CRYPTOTHEOLOGY = "cryptotheology"
    CURRENCY = "currency"
    DIMENSIONAL_PHYSICS = "dimensionalPhysics"
    DRAMA = "drama"
    ECOLOGY = "ecology"
    ELECTRICITY = "electricity"
    ELECTRONICS = "electronics"
    ENGINEERING = "engineering"
    EXOGEOLOGY = "exogeology"
    EXOGEOPHYSICS = "exogeophysics"
    GENETICS = "genetics"
    HYDROPONICS = "hydroponics"
    INDUSTRIALIZATION = "industrialization"
    MACHINERY = "machinery"
    MATH = "math"
    MECHANIZATION = "mechanization"
    METAL = "metal"
    METALURGY = "metalurgy"
    METAPHYSICS = "metaphysics"
    MINING = "mining"
    NANOTECHNOLOGY = "nanotechnology"
    NAVIGATION = "navigation"
    NUCLEAR_FISSION = "nuclearFission"
    OIL_PROCESSING = "oilProcessing"
    ORBITAL_ENGINEERING = "orbitalEngineering"
    PARADOXAL_KNOWLEDGE = "paradoxalKnowledge"
    PARTICLE_PHYSICS = "particlePhysics"
    PHILOSOPHY = "philosophy"
    PHYSICS = "physics"
    QUANTUM_CRYPTOGRAPHY = "quantumCryptography"
    ROBOTICS = "robotics"
    ROCKETRY = "rocketry"
    SATTELITES = "sattelites"
    STEEL = "steel"
    SUPERCONDUCTORS = "superconductors"
    TACHYON_THEORY = "tachyonTheory"
    TERRAFORMATION = "terraformation"
    THEOLOGY = "theology"
    THORIUM = "thorium"
    VOID_SPACE = "voidSpace"
    WRITING = "writing"


class Policy(StrEnum):
    """Adoptable policies (``game.science.policies``)."""

    AUTHOCRACY = "authocracy"
    BIG_STICK_POLICY = "bigStickPolicy"
    CITY_ON_A_HILL = "cityOnAHill"
    CLEAR_CUTTING = "clearCutting"
    COMMUNISM = "communism"
    CONSERVATION = "conservation"
    CULTURAL_EXCHANGE = "culturalExchange"
    DIPLOMACY = "diplomacy"
    ENVIRONMENTALISM = "environmentalism"
    EPICUREANISM = "epicureanism"
    EXPANSIONISM = "expansionism"
    FASCISM = "fascism"
    FRUGALITY = "frugality"
    FULL_INDUSTRIALIZATION = "fullIndustrialization"
    ISOLATIONISM = "isolationism"
    KNOWLEDGE_SHARING = "knowledgeSharing"
    LIBERALISM = "liberalism"
    LIBERTY = "liberty"
    MILITARIZE_SPACE = "militarizeSpace"
    MONARCHY = "monarchy"
    MYSTICISM = "mysticism"
    NECROCRACY = "necrocracy"
    OPEN_WOODLANDS = "openWoodlands"
    OUTER_SPACE_TREATY = "outerSpaceTreaty"
    RADICAL_XENOPHOBIA = "radicalXenophobia"
    RATIONALITY = "rationality"
    REPUBLIC = "republic"
    SOCIALISM = "socialism"
    STRIP_MINING = "stripMining"
    SUSTAINABILITY = "sustainability"
    TECHNOCRACY = "technocracy"
    THEOCRACY = "theocracy"
    TRADITION = "tradition"
    TRANSKITTENISM = "transkittenism"
    ZEBRA_RELATIONS_APPEASEMENT = "zebraRelationsAppeasement"
    ZEBRA_RELATIONS_BELLICOSITY = "zebraRelationsBellicosity"


class BonfireBuilding(StrEnum):
    """Buildings constructed from the bonfire tab (``game.bonfire.buildingsData``)."""

    ACADEMY = "academy"
    ACCELERATOR = "accelerator"
    AI_CORE = "aiCore"
    AMPHITHEATRE = "amphitheatre"
    AQUEDUCT = "aqueduct"
    BARN = "barn"
    BIOLAB = "biolab"
    BREWERY = "brewery"
    CALCINER = "calciner"
    CHAPEL = "chapel"
    CHRONOSPHERE = "chronosphere"
    FACTORY = "factory"
    FIELD = "field"
    HARBOR = "harbor"
    HUT = "hut"
    LIBRARY = "library"
    LOG_HOUSE = "logHouse"
    LUMBER_MILL = "lumberMill"
    MAGNETO = "magneto"
    MANSION = "mansion"
    MINE = "mine"
    MINT = "mint"
    OBSERVATORY = "observatory"
    OIL_WELL = "oilWell"
    PASTURE = "pasture"
    QUARRY = "quarry"
    REACTOR = "reactor"
    SMELTER = "smelter"
    STEAMWORKS = "steamworks"
    TEMPLE = "temple"
    TRADEPOST = "tradepost"
    UNICORN_PASTURE = "unicornPasture"
    WAREHOUSE = "warehouse"
    WORKSHOP = "workshop"
    ZIGGURAT = "ziggurat"


class SpaceBuilding(StrEnum):
    """Buildings constructed on planets (``game.space.planets[].buildings``)."""

    CONTAINMENT_CHAMBER = "containmentChamber"
    CRYOSTATION = "cryostation"
    ENTANGLER = "entangler"
    HEATSINK = "heatsink"
    HR_HARVESTER = "hrHarvester"
    HYDROFRACTURER = "hydrofracturer"
    HYDROPONICS = "hydroponics"
    MOLTEN_CORE = "moltenCore"
    MOON_BASE = "moonBase"
    MOON_OUTPOST = "moonOutpost"
    ORBITAL_ARRAY = "orbitalArray"
    PLANET_CRACKER = "planetCracker"
    RESEARCH_VESSEL = "researchVessel"
    SATTELITE = "sattelite"
    SPACE_BEACON = "spaceBeacon"
    SPACE_ELEVATOR = "spaceElevator"
    SPACE_STATION = "spaceStation"
    SPICE_REFINERY = "spiceRefinery"
    SUNFORGE = "sunforge"
    SUNLIFTER = "sunlifter"
    TECTONIC = "tectonic"
    TERRAFORMING_STATION = "terraformingStation"


class Mission(StrEnum):
    """Space programs (``game.space.programs``)."""

    CENTAURUS_SYSTEM_MISSION = "centaurusSystemMission"
    CHARON_MISSION = "charonMission"
    DUNE_MISSION = "duneMission"
    FURTHEST_RING_MISSION = "furthestRingMission"
    HELIOS_MISSION = "heliosMission"
    KAIRO_MISSION = "kairoMission"
    MOON_MISSION = "moonMission"
    ORBITAL_LAUNCH = "orbitalLaunch"
    PISCINE_MISSION = "piscineMission"
    RORSCHACH_MISSION = "rorschachMission"
    TERMINUS_MISSION = "terminusMission"
    UMBRA_MISSION = "umbraMission"
    YARN_MISSION = "yarnMission"


class Race(StrEnum):
    """Trade partners (``game.diplomacy.races``)."""

    DRAGONS = "dragons"
    GRIFFINS = "griffins"
    LEVIATHANS = "leviathans"
    LIZARDS = "lizards"
    NAGAS = "nagas"
    SHARKS = "sharks"
    SPIDERS = "spiders"
    ZEBRAS = "zebras"


class Season(StrEnum):
    """Calendar seasons. Trades can be restricted per season."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class Resource(StrEnum):
    """Stockpiled resources (``game.resPool.resources``)."""

    ALICORN = "alicorn"
    ALLOY = "alloy"
    ANTIMATTER = "antimatter"
    BEAM = "beam"
    BLACKCOIN = "blackcoin"
    BLOODSTONE = "bloodstone"
    BLUEPRINT = "blueprint"
    CATNIP = "catnip"
    COAL = "coal"
    COMPEDIUM = "compedium"
    CONCRATE = "concrate"
    CULTURE = "culture"
    ELDER_BOX = "elderBox"
    ELUDIUM = "eludium"
    FAITH = "faith"
    FURS = "furs"
    GEAR = "gear"
    GOLD = "gold"
    IRON = "iron"
    IVORY = "ivory"
    KARMA = "karma"
    KEROSENE = "kerosene"
    MANPOWER = "manpower"
    MANUSCRIPT = "manuscript"
    MEGALITH = "megalith"
    MINERALS = "minerals"
    NECROCORN = "necrocorn"
    OIL = "oil"
    PARAGON = "paragon"
    PARCHMENT = "parchment"
    PLATE = "plate"
    RELIC = "relic"
    SCAFFOLD = "scaffold"
    SCIENCE = "science"
    SHIP = "ship"
    SLAB = "slab"
    SORROW = "sorrow"
    SPICE = "spice"
    STARCHART = "starchart"
    STEEL = "steel"
    TANKER = "tanker"
    TEARS = "tears"
    TEMPORAL_FLUX = "temporalFlux"
    THORIUM = "thorium"
    TIME_CRYSTAL = "timeCrystal"
    TITANIUM = "titanium"
    UNICORNS = "unicorns"
    UNOBTAINIUM = "unobtainium"
    URANIUM = "uranium"
    VOID = "void"
    WOOD = "wood"
    WRAPPING_PAPER = "wrappingPaper"
    ZEBRAS = "zebras"
