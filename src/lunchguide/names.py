"""
Restaurant identity lookup.

The listing never prints restaurant names as text, only as logo images, so the
name is recovered from the logo's image reference. Names are kept exactly as the
site spells them, HTML entities included.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

import structlog

logger = structlog.get_logger(__name__)

# Grouped by region for maintenance only; lookups ignore the grouping.
_NAME_TABLE: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "Falun": (
        ("lunchlogo/club-etage.gif", "Club Etage"),
        ("lunchlogo/chinathai.gif", "Restaurang China Thai"),
        ("lunchlogo/hemkop.gif", "Hemk&ouml;p"),
        ("lunchlogo/LugnetMatEvent.gif", "Lugnet Mat &amp; Event"),
        ("lunchlogo/Z-KROG.gif", "Z-krog"),
        ("lunchlogo/City_Life.gif", "City Life"),
        ("lunchlogo/geschwornergarden_09.gif", "Geschwornerg&auml;rden"),
        ("lunchlogo/Gamla-staberg-2010.gif", "Gamla Staberg"),
        ("lunchlogo/koppis.gif", "Restaurang Koppis"),
        ("lunchlogo/carianna.gif", "Restaurang Cari Anna"),
        ("lunchlogo/marianns_05.gif", "Mariann's Saloon"),
        ("lunchlogo/dalasalen_dalreg.gif", "Dalasalen"),
        ("lunchlogo/kuselska-rappans.gif", "K&uuml;selska Krogen"),
        ("lunchlogo/framby-udde-2.gif", "Runns aktivitetscenter"),
        ("lunchlogo/hammars.gif", "Hammars"),
        ("lunchlogo/Restaurang_Chapeau_dor.gif", "Chapeau d'or"),
        ("lunchlogo/ah.gif", "&Aring;h"),
        ("lunchlogo/haganas.gif", "Hagan&auml;s"),
        ("lunchlogo/Pitchers.gif", "Pitchers"),
        ("lunchlogo/Dossbergets-vardshus.gif", "D&ouml;ssbergets v&auml;rdshus"),
        ("lunchlogo/trotzgatan3.gif", "Trotzgatan 3"),
        ("lunchlogo/Victuscella.gif", "Victuscella"),
        ("lunchlogo/Scandic_lugnet.gif", "Scandic"),
        ("lunchlogo/HettoVilt.gif", "Hett &amp; Vilt"),
        ("lunchlogo/Yrkesakademin.gif", "Yrkesakademin"),
    ),
    "Borlange": (
        ("lunchlogo/BlgHV.gif", "Borl&auml;nge Hotel &amp; V&auml;rdshus"),
        ("lunchlogo/liljan.gif", "Restaurang Liljan"),
        ("lunchlogo/Tzatziki-blge.gif", "Tzatziki"),
        ("lunchlogo/thai-o-sushi.gif", "Restaurang Thai &amp; Sushi"),
        ("lunchlogo/Dalaflyget.gif", "Dalaflyget"),
        ("lunchlogo/subway.gif", "Subway"),
        ("lunchlogo/buskakersgastgiv.gif", "Busk&aring;kers G&auml;stgifvarg&aring;rd"),
        ("lunchlogo/matpalatset.gif", "Matpalatset"),
        ("lunchlogo/octaven_logo.gif", "Restaurang Octaven"),
        ("lunchlogo/bla_lagan.gif", "Bl&aring; L&aring;gan"),
        ("lunchlogo/coop_forum.gif", "Coop Forum"),
        ("lunchlogo/Festmakarna06.gif", "Festmakarna"),
        ("lunchlogo/kok-nystrom.gif", "K&ouml;k Nystr&ouml;m restaurang &amp; catering"),
        ("lunchlogo/Lilla-Krogen_2010.gif", "Gamla Lilla Krogen Werners"),
        ("lunchlogo/matopotatis.gif", "Mat &amp; Potatis"),
        ("lunchlogo/Officerssalongen-2010.gif", "Officiersalongen"),
        ("lunchlogo/Restaurang-Fortuna-09.gif", "Restaurang Fortuna"),
        ("lunchlogo/Sushilovers.gif", "Sushi Lovers"),
        ("lunchlogo/travinn.gif", "Trav Inn"),
        ("lunchlogo/ya.gif", "Yrkesakademin"),
        ("lunchlogo/Scandic_blge.gif", "Scandic"),
        ("lunchlogo/TeknikdRest.gif", "Teknikdalens Restaurang"),
        ("lunchlogo/Broken-Dreams-borlange.gif", "Broken Dreams"),
        ("lunchlogo/Wild_West_Restaurang.gif", "Wild West Restaurang"),
        ("lunchlogo/The-Rock-House.gif", "The Rock House"),
        ("lunchlogo/Mathornan-Galaxen.gif", "Math&ouml;rnan Galaxen"),
        ("lunchlogo/bragematsalen.gif", "Brage Matsalen"),
        ("lunchlogo/matlagarna.gif", "Matlagarna"),
    ),
    "Ludvika": (
        ("lunchlogo/Ahlens_cafe.gif", "&Aringhl&eacute;ns caf&eacute;"),
        ("lunchlogo/Gallerian.gif", "Restaurang &amp; Cafe Gallerian"),
        ("lunchlogo/Hagge_Golfkrog_20105.gif", "Hagge Golfkrog"),
        ("lunchlogo/Kan-Elen-logo.gif", "Kan Elen"),
        ("lunchlogo/Piren_2009.gif", "Restaurang Piren"),
        ("lunchlogo/pizzeria_milano.gif", "Pizzeria Milano"),
        ("lunchlogo/silverdollar.gif", "Silverdollar"),
        ("lunchlogo/smedjebackens-wardshus.gif", "Smedjebackens W&auml;rdshus"),
        ("lunchlogo/Stations_Kiosken.gif", "Stations Kiosken"),
        ("lunchlogo/stopet.gif", "Hotell &amp; V&aumlrdshus Stopet"),
        ("lunchlogo/Sussis-Mat.gif", "Sussi's Mat &amp; Catering"),
        ("lunchlogo/Wanbo-Herrgard.gif", "Wanbo Herrg&aring;rd"),
        ("lunchlogo/Viljan-cafe.gif", "Viljan"),
        ("lunchlogo/Gourmet.gif", "Restaurang Gourmet Pizzeria"),
        ("lunchlogo/Kyrkogatan-no-9.gif", "Kyrkogatan no. 9"),
        ("lunchlogo/McDonalds2010.gif", "McDonalds"),
    ),
    "Mora": (
        ("lunchlogo/Backa-Herrgard_09.gif", "B&auml;cka Herrg&aring;rd"),
        ("lunchlogo/bykrogen2.gif", "Bykrogen"),
        ("lunchlogo/Cafe_Oscar.gif", "Restaurang &amp; Caf&eacute; Oscar"),
        ("lunchlogo/Hotell-Alvdalen.gif", "Hotell &Auml;lvdalen"),
        ("lunchlogo/hotell-kung-gosta.gif", "Hotell Kung G&ouml;sta"),
        ("lunchlogo/moraparken.gif", "Mora Parken"),
        ("lunchlogo/Orsa_Stadshotell.gif", "Orsa Stadshotell"),
        ("lunchlogo/Strand-kok-o-bar.gif", "strand K&ouml;k &amp; Bar"),
        ("lunchlogo/Vasagatan-32.gif", "Restaurang Vasagatan 32"),
        ("lunchlogo/Wasastugan.gif", "Restaurang Wasastugan"),
        ("lunchlogo/vi_pa_hornet.gif", "Vi p&aring; H&ouml;rnet"),
        ("lunchlogo/Orsa-Stadshotell.gif", "Orsa Stadshotell"),
        ("lunchlogo/FM-Mattson.gif", "FM Mattsson arena"),
        ("lunchlogo/Noret-Restaurang.gif", "Noret Restaurang &amp; Pizzeria"),
        ("lunchlogo/Pasha-restaurang2010.gif", "Pasha Restaurang &amp; Pizzeria"),
        ("lunchlogo/Famous-Moose-Restaurang.gif", "Famous Moose"),
        ("lunchlogo/Jacob.gif", "Jacob restaurang &amp; bar"),
        ("lunchlogo/Ljungbergs-Sportsbar.gif", "Ljungbergs sportsbar"),
        ("lunchlogo/Wibe-Restaurangen.gif", "Wibe Restaurangen"),
    ),
    "Sater/Hedemora": (
        ("lunchlogo/akropolis_sdt.gif", "Restaurang Akropolis"),
        ("lunchlogo/bla-lagunen.gif", "Bl&aring; Lagunen"),
        ("lunchlogo/lappens.gif", "Lappens V&auml;gkrog"),
        ("lunchlogo/restaurang-skonvik.gif", "Restaurang Sk&ouml;nvik"),
        ("lunchlogo/The_Kings_Arms_2.gif", "The Kings Arms"),
        ("lunchlogo/Restaurang-Tjarna-Brunn.gif", "Restaurang Tj&auml;rna Brunn"),
        ("lunchlogo/tjarna-brunn.gif", "Restaurang Tj&auml;rna Brunn"),
        ("lunchlogo/Pizzeria-Athena.gif", "Pizzeria Athena"),
    ),
}


def _flatten(table: Mapping[str, Tuple[Tuple[str, str], ...]]) -> Dict[str, str]:
    names: Dict[str, str] = {}
    for pairs in table.values():
        for image_reference, name in pairs:
            names[image_reference] = name
    return names


class NameResolver:
    """
    Exact-match lookup from image reference to canonical restaurant name.

    Matching is case-sensitive full-string equality. An unknown reference
    resolves to "" and logs a warning so the table can be extended.
    """

    def __init__(self, names: Optional[Mapping[str, str]] = None) -> None:
        self._names: Dict[str, str] = dict(_flatten(_NAME_TABLE) if names is None else names)

    def __len__(self) -> int:
        return len(self._names)

    @staticmethod
    def regions() -> Tuple[str, ...]:
        return tuple(_NAME_TABLE.keys())

    def resolve(self, image_reference: str) -> str:
        name = self._names.get(image_reference)
        if name is None:
            logger.warning(
                "Unable to match restaurant name to image, name table needs updating",
                image_reference=image_reference,
            )
            return ""
        return name

    def with_overrides(self, path: Union[str, Path]) -> "NameResolver":
        """
        Return a resolver extended with pairs from a JSON object file.

        Entries in the file win over the built-in table.
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Name table {path} must be a JSON object")

        merged = dict(self._names)
        merged.update({str(k): str(v) for k, v in raw.items()})
        logger.info("Name table extended", path=str(path), added=len(raw), total=len(merged))
        return NameResolver(merged)


_default_resolver: Optional[NameResolver] = None


def get_name_resolver() -> NameResolver:
    """Shared resolver over the built-in table."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = NameResolver()
    return _default_resolver
