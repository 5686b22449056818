"""
Standard GEDCOM 5.5.1 tag vocabulary.

Tags outside this set (including every ``_``-prefixed vendor tag) are
reported as Unknown-Tag when captured as extensions.
"""

from __future__ import annotations

STANDARD_TAGS = frozenset(
    {
        "ABBR", "ADDR", "ADOP", "ADR1", "ADR2", "ADR3", "AFN", "AGE", "AGNC",
        "ALIA", "ANCE", "ANCI", "ANUL", "ASSO", "AUTH",
        "BAPL", "BAPM", "BARM", "BASM", "BIRT", "BLES", "BLOB", "BURI",
        "CALN", "CAST", "CAUS", "CENS", "CHAN", "CHAR", "CHIL", "CHR", "CHRA",
        "CITY", "CONC", "CONF", "CONL", "CONT", "COPR", "CORP", "CREM", "CTRY",
        "DATA", "DATE", "DEAT", "DESC", "DESI", "DEST", "DIV", "DIVF", "DSCR",
        "EDUC", "EMAIL", "EMIG", "ENDL", "ENGA", "EVEN",
        "FACT", "FAM", "FAMC", "FAMF", "FAMS", "FAX", "FCOM", "FILE", "FONE", "FORM",
        "GEDC", "GIVN", "GRAD",
        "HEAD", "HUSB",
        "IDNO", "IMMI", "INDI",
        "LANG", "LATI", "LEGA", "LONG",
        "MAP", "MARB", "MARC", "MARL", "MARR", "MARS", "MEDI",
        "NAME", "NATI", "NATU", "NCHI", "NICK", "NMR", "NOTE", "NPFX", "NSFX",
        "OBJE", "OCCU", "ORDI", "ORDN",
        "PAGE", "PEDI", "PHON", "PLAC", "POST", "PROB", "PROP", "PUBL",
        "QUAY",
        "REFN", "RELA", "RELI", "REPO", "RESI", "RESN", "RETI", "RFN", "RIN",
        "ROLE", "ROMN",
        "SEX", "SLGC", "SLGS", "SOUR", "SPFX", "SSN", "STAE", "STAT", "SUBM",
        "SUBN", "SURN",
        "TEMP", "TEXT", "TIME", "TITL", "TRLR", "TYPE",
        "VERS",
        "WIFE", "WILL", "WWW",
    }
)


def is_standard_tag(tag: str) -> bool:
    return (tag or "").upper() in STANDARD_TAGS
