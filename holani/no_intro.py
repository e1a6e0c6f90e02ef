"""Recognition of headerless cartridge dumps by their MD5 digest."""

import hashlib

from .lnx_header import LNXRotation

_NONE = LNXRotation.NONE
_R270 = LNXRotation.ROTATE_270
_R90 = LNXRotation.ROTATE_90

_KNOWN_DUMPS: dict[str, tuple[str, LNXRotation]] = {
    "b425941149874c6371c40e85cc5b6241": ("A.P.B. (USA, Europe)", _NONE),
    "8ce6c739d30d6c5ba197fcdd73d5ead5": ("Alien vs Predator (USA) (Proto) (1993-12-17)", _NONE),
    "49d6eeb3c983246ff4d7034497f7095c": ("Awesome Golf (USA, Europe)", _NONE),
    "8c9a72ddbb5559293862684ec67bfa92": ("Baseball Heroes (USA, Europe)", _NONE),
    "f19b95e4835c5fbc44b180dbd3f024fc": ("Basketbrawl (USA, Europe)", _NONE),
    "6e9bbff3c7b66d3ec0411ffbe0e41dfd": ("Batman Returns (USA, Europe)", _NONE),
    "fddecd756abe5eaf613ca1db31d51df7": ("Battle Wheels (USA, Europe)", _NONE),
    "d405ea54b77390b06222f9dac7cea827": ("Battlezone 2000 (USA, Europe)", _NONE),
    "87dff4f4d5e1e4a7132d19f94d4e9b3a": ("Bill & Ted's Excellent Adventure (USA, Europe)", _NONE),
    "c81abf2919effd525b83c2103b75e6ca": ("Block Out (USA, Europe)", _NONE),
    "7c3cb287de2d9f67ff342b4e42592732": ("Blue Lightning (USA, Europe) (Demo)", _NONE),
    "f7b4775771bc25d9053af5c69a8c8b2a": ("Blue Lightning (USA, Europe)", _NONE),
    "90841f8fed54862f8a8750ddf212eb84": ("Bubble Trouble (USA, Europe)", _NONE),
    "73e02bb77dcf857a6578f0e24b4ecb9e": ("California Games (USA, Europe)", _NONE),
    "13cb869b95c67c532efdd0e924e37299": ("Centipede (USA) (Proto)", _NONE),
    "85b33c5e5985ab041ecc44555a8cfb42": ("Checkered Flag (USA, Europe)", _NONE),
    "24611d1445ebd34ab79fb0ae996ff4e4": ("Chip's Challenge (USA, Europe)", _NONE),
    "b4acbd3c544a0d92cc8ad1380bf8a810": ("Crystal Mines II (USA, Europe)", _NONE),
    "f8b4debd68eb0d7c578242fa74e1c593": ("Daemonsgate (USA) (Proto)", _NONE),
    "f764b88c44afa8b5ebefb8eb2e4d7b97": ("Desert Strike - Return to the Gulf (USA, Europe)", _NONE),
    "9496be61fd0675553f05345c5fc2d15c": ("Dinolympics (USA, Europe)", _NONE),
    "8cd77bec912c9b4dcebd8a82dcf91a0b": ("Dirty Larry - Renegade Cop (USA, Europe)", _NONE),
    "0e91b7ed60bb47d569ba24df671ad3a3": ("Double Dragon (USA, Europe)", _NONE),
    "3ff35996887c2ff95e275085efbbbbed": ("Dracula the Undead (USA, Europe)", _NONE),
    "c49ca94a908db219224c6d5baa206ab6": ("Electrocop (USA, Europe)", _NONE),
    "32e726ab7941eb1e833dcc4cf348a060": ("European Soccer Challenge (USA, Europe)", _NONE),
    "858480bb97d86a52b1ca17dc390a8bdc": ("Eye of the Beholder (USA) (Proto)", _NONE),
    "7b3f49bda3162fac51a387905e6fb6f4": ("Eye of the Beholder (USA) (Unl)", _NONE),
    "69abd21c83390dae54630919c3c150d0": ("Fat Bobby (USA, Europe)", _NONE),
    "19eb0ca77284b5d91a63eb02f6962930": ("Fidelity Ultimate Chess Challenge, The (USA, Europe)", _NONE),
    "d5be9118bcb14243468001b08c4aa21a": ("Gates of Zendocon (USA, Europe)", _NONE),
    "8815ea087af1aa89b4f7b65bd3cb8534": ("Gauntlet - The Third Encounter (USA, Europe) (Beta) (1990-06-04)", _R270),
    "0b572c0dfb938849eeec39b2c9583547": ("Gauntlet - The Third Encounter (USA, Europe)", _R270),
    "eb9b5b2b6160e5f3015bc2a669d886b6": ("Gordo 106 (USA, Europe)", _NONE),
    "c265f0de8c5bd77db8f9cf5a1f7ab68f": ("Hard Drivin' (USA, Europe)", _NONE),
    "a08b8070ad613bdb2637162b3bf39574": ("Hockey (USA, Europe)", _NONE),
    "76a48869c14fbcf85588001a1327253d": ("Hydra (USA, Europe)", _NONE),
    "addc6c0ae7b535839815b8e7f7fd0f11": ("Ishido - The Way of Stones (USA, Europe)", _NONE),
    "087e6ed018ad0573bd7ce3a91d34f2c9": ("Jimmy Connors' Tennis (USA, Europe)", _NONE),
    "440462507cf5cffaa8d3d3a66f01ac6a": ("Joust (USA, Europe)", _NONE),
    "57043e8e79588c067118a4d5f307cd76": ("Klax (USA, Europe) (Beta)", _R270),
    "f96a0ddcc72c971226e8fdfd95607c88": ("Klax (USA, Europe)", _R270),
    "7e82db12a5749ab983e2f3c8bf4c0f6e": ("Krazy Ace - Miniature Golf (USA, Europe)", _NONE),
    "e5e42190918847b8c6056e78316ee91d": ("Kung Food (USA, Europe)", _NONE),
    "3cae85572df3b43f0220326bf4bb3c8b": ("Lemmings (USA, Europe)", _NONE),
    "7ee41edaef283459c9df93366c5da267": ("Lexis (USA)", _NONE),
    "96fd77f3527bc6f65977b99ab63d7f84": ("Lode Runner (USA) (Proto) (Unl)", _NONE),
    "8399c8fba48ba1a4389a96e75838dc49": ("Loopz (USA) (Proto)", _NONE),
    "05d28ab0e92b19147e7f5ea88c6efb6d": ("Lynx Casino (USA, Europe)", _NONE),
    "5d8fdfb15441cdfb8a1c66c243c486da": ("Lynx II Production Test Program (USA)", _NONE),
    "98c851c7ed924e1c7123c60e5164819e": ("Malibu Bikini Volleyball (USA, Europe) (Beta) (1993-05-11)", _NONE),
    "280344c8b073895ecce286d1b9d87d8b": ("Malibu Bikini Volleyball (USA, Europe)", _NONE),
    "194a3eeb876d2b74cc480f4d337d79b3": ("Marlboro Go! (Europe) (Proto)", _NONE),
    "192b6b764a3a1c7831e0a785fa4b5453": ("Ms. Pac-Man (USA, Europe)", _NONE),
    "276b9be28571189912f05d321fcb04ef": ("NFL Football (USA, Europe)", _R90),
    "7ec4063eb6c7c74600d6a16fb3a3bdbd": ("Ninja Gaiden (USA, Europe)", _NONE),
    "c9ed2a3bdefd6d5fdf67302d87b5cfb2": ("Ninja Gaiden III - The Ancient Ship of Doom (USA, Europe)", _NONE),
    "0a14754b351b4f11a1359e252b8eb992": ("Pac-Land (USA, Europe)", _NONE),
    "2a59d2ca6d6f07bc2791bf349e2778ee": ("Paperboy (USA, Europe)", _NONE),
    "29a248fbc87f477b49587581e29c1dc7": ("Pinball Jam (USA, Europe)", _NONE),
    "5565889a9a8817f99ec6dda322a70877": ("Pit-Fighter (USA, Europe)", _NONE),
    "b29414b8c81cc9ef28ef2f7a09d6d876": ("Power Factor (USA, Europe)", _NONE),
    "12e1eb0900402ef6de8b72dda5d22f47": ("QIX (USA, Europe)", _NONE),
    "abfd6ae93c31e8f59aa934ad922cb4dd": ("Raiden (USA) (Proto)", _R270),
    "e0cb426257761c3688a866332ed48340": ("Rampage (USA, Europe)", _NONE),
    "d8045ed542d5e58c779c884e0930e16c": ("Rampart (USA, Europe)", _NONE),
    "702e4d515d9f33698407b118c4cd373f": ("Road Riot 4WD (USA) (Proto 1)", _NONE),
    "8e0680d9d484749297bd7f4cfd5b7354": ("Road Riot 4WD (USA) (Proto 2)", _NONE),
    "9222e42a160924dee0c87a67fdbc48d0": ("Road Riot 4WD (USA) (Proto 3)", _NONE),
    "39617ebb81f3c1df27354c18571bd6c3": ("RoadBlasters (USA, Europe)", _NONE),
    "f9faa45e3c35e505249c3f9df801737b": ("Robo-Squash (USA, Europe)", _NONE),
    "60c1dfbf112bbb2a49cf16eddb191842": ("Robotron 2084 (USA, Europe)", _NONE),
    "ff6fff314446ab70dfecb21e2de4a2f6": ("Rygar (USA, Europe)", _NONE),
    "490f8063bbb299070c4aceab64195088": ("S.T.U.N. Runner (USA, Europe)", _NONE),
    "0cf228912d2f8eeb29aa215abf416f6d": ("Scrapyard Dog (USA, Europe)", _NONE),
    "f92d57198ef2da30dba63bdd7c15ff83": ("Shadow of the Beast (USA, Europe)", _NONE),
    "46634eb87e6380d4d10f7b80d177c1ff": ("Shanghai (USA, Europe)", _NONE),
    "8828c0042a1a397de67c4e49042161ff": ("Steel Talons (USA, Europe)", _NONE),
    "67dd69e6ffaf61bc85243d272d9ee9d9": ("Super Asteroids, Missile Command (USA, Europe)", _NONE),
    "6cd23cb37c4c4c34ef4e197468462f3f": ("Super Off-Road (USA, Europe)", _NONE),
    "a19802bd3a7e390daf7e2cbe5a81ed38": ("Super Skweek (USA, Europe)", _NONE),
    "4971dd8b47d3475dc8d31b5325c14459": ("Switchblade II (USA, Europe)", _NONE),
    "4581ac0418679567dce041c88cc97719": ("Todd's Adventures in Slime World (USA, Europe)", _NONE),
    "ec46311f47276e20cc43228c96d119a1": ("Toki (USA, Europe)", _NONE),
    "391dfaba9ab8b9b60e9d8ca2a73f5711": ("Tournament Cyberball (USA, Europe)", _NONE),
    "8caaaf56f95ee0bb610ca14af2d12a61": ("Turbo Sub (USA, Europe)", _NONE),
    "44d7c4ea6b8d930075f5b05c94b5f973": ("Viking Child (USA, Europe)", _NONE),
    "e7f118ac59f985ceea2ecfc0f17e9cc6": ("Warbirds (USA, Europe)", _NONE),
    "7fcf204013cbedf7eaaf682ff5f216ba": ("World Class Soccer (USA, Europe)", _NONE),
    "69fb597cb4db019c48fd2e0c1cc7b75c": ("Xenophobe (USA, Europe)", _NONE),
    "c145bfe904e5d56f479df44204b255da": ("Xybots (USA, Europe)", _NONE),
    "52997de9af205728a0e17ea3475f7ae2": ("Zaku (USA) (Beta) (Unl)", _NONE),
    "6b9d6872961b22de6b1b0cced65d8e3f": ("Zaku (USA) (Unl)", _NONE),
    "d008f41ec119e2c5c6a0782aebf148a8": ("Zarlor Mercenary (USA, Europe)", _NONE),
}


def check_no_intro(data: bytes) -> tuple[str, LNXRotation]:
    """Return the title and rotation of a known headerless dump.

    Raises LookupError when the dump's digest is not in the catalogue.
    """
    digest = hashlib.md5(data).hexdigest()
    try:
        return _KNOWN_DUMPS[digest]
    except KeyError:
        raise LookupError(f"unknown cartridge dump (md5 {digest})") from None