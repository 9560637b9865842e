"""Grocery store directory for Newfoundland & Labrador."""

from dataclasses import dataclass
from typing import List, Optional, Dict


@dataclass(frozen=True)
class Store:
    id: str
    chain_id: str
    name: str
    type: str  # Chain type, e.g. "sobeys", "dominion", "costco", "coleman"
    address: str
    city: str
    location_id: str

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "chain_id": self.chain_id,
            "name": self.name,
            "type": self.type,
            "address": self.address,
            "city": self.city,
            "location_id": self.location_id,
        }


GROCERY_CHAINS: Dict[str, str] = {
    "sobeys": "Sobeys",
    "dominion": "Dominion",
    "costco": "Costco",
    "coleman": "Coleman's",
    "pipers": "Pipers",
    "northern": "Northern Store",
}

STORES: List[Store] = [
    # St. John's
    Store("sobeys-avalon-mall", "sobeys", "Sobeys Avalon Mall", "sobeys", "48 Kenmount Rd", "St. John's", "st-johns"),
    Store("sobeys-torbay-road", "sobeys", "Sobeys Torbay Road", "sobeys", "30 Torbay Rd", "St. John's", "st-johns"),
    Store("sobeys-kelsey-drive", "sobeys", "Sobeys Kelsey Drive", "sobeys", "50 Kelsey Dr", "St. John's", "st-johns"),
    Store("dominion-freshwater-road", "dominion", "Dominion Freshwater Road", "dominion", "430 Freshwater Rd", "St. John's", "st-johns"),
    Store("dominion-village-mall", "dominion", "Dominion Village Mall", "dominion", "430 Topsail Rd", "St. John's", "st-johns"),
    Store("dominion-blackmarsh", "dominion", "Dominion Blackmarsh Road", "dominion", "200 Blackmarsh Rd", "St. John's", "st-johns"),
    Store("costco-st-johns", "costco", "Costco St. John's", "costco", "38 Stavanger Dr", "St. John's", "st-johns"),
    # Mount Pearl / Paradise / CBS
    Store("sobeys-mount-pearl", "sobeys", "Sobeys Mount Pearl", "sobeys", "60 Commonwealth Ave", "Mount Pearl", "mount-pearl"),
    Store("dominion-mount-pearl", "dominion", "Dominion Mount Pearl", "dominion", "70 Commonwealth Ave", "Mount Pearl", "mount-pearl"),
    Store("sobeys-paradise", "sobeys", "Sobeys Paradise", "sobeys", "1296 Topsail Rd", "Paradise", "paradise"),
    Store("sobeys-cbs", "sobeys", "Sobeys Conception Bay South", "sobeys", "737 Conception Bay Hwy", "Conception Bay South", "conception-bay-south"),
    # Western
    Store("sobeys-corner-brook", "sobeys", "Sobeys Corner Brook", "sobeys", "1 Murphy Square", "Corner Brook", "corner-brook"),
    Store("dominion-corner-brook", "dominion", "Dominion Corner Brook", "dominion", "42 Main St", "Corner Brook", "corner-brook"),
    Store("costco-corner-brook", "costco", "Costco Corner Brook", "costco", "5 Murphy Square", "Corner Brook", "corner-brook"),
    Store("coleman-corner-brook", "coleman", "Coleman's Corner Brook", "coleman", "15 West St", "Corner Brook", "corner-brook"),
    Store("sobeys-stephenville", "sobeys", "Sobeys Stephenville", "sobeys", "42 Queen St", "Stephenville", "stephenville"),
    # Central
    Store("dominion-gander", "dominion", "Dominion Gander", "dominion", "109 Elizabeth Dr", "Gander", "gander"),
    Store("coleman-gander", "coleman", "Coleman's Gander", "coleman", "115 Airport Blvd", "Gander", "gander"),
    Store("sobeys-grand-falls", "sobeys", "Sobeys Grand Falls-Windsor", "sobeys", "2 High St", "Grand Falls-Windsor", "grand-falls-windsor"),
    Store("dominion-grand-falls", "dominion", "Dominion Grand Falls-Windsor", "dominion", "5 Cromer Ave", "Grand Falls-Windsor", "grand-falls-windsor"),
    # Eastern / Avalon outside the metro
    Store("dominion-clarenville", "dominion", "Dominion Clarenville", "dominion", "189 Memorial Dr", "Clarenville", "clarenville"),
    Store("dominion-carbonear", "dominion", "Dominion Carbonear", "dominion", "85 Columbus Dr", "Carbonear", "carbonear"),
    Store("coleman-bay-roberts", "coleman", "Coleman's Bay Roberts", "coleman", "44 Conception Bay Hwy", "Bay Roberts", "bay-roberts"),
    Store("dominion-marystown", "dominion", "Dominion Marystown", "dominion", "1 Ville Marie Dr", "Marystown", "marystown"),
    # Labrador
    Store("dominion-labrador-city", "dominion", "Dominion Labrador City", "dominion", "500 Vanier Ave", "Labrador City", "labrador-city"),
    Store("northern-happy-valley", "northern", "Northern Store Happy Valley-Goose Bay", "northern", "369 Hamilton River Rd", "Happy Valley-Goose Bay", "happy-valley-goose-bay"),
]

_STORES_BY_ID: Dict[str, Store] = {store.id: store for store in STORES}


def get_store_by_id(store_id: str) -> Optional[Store]:
    return _STORES_BY_ID.get(store_id)


def get_store_name(store_id: str) -> str:
    """Display name for a store id; unknown ids fall back to the id itself."""
    store = get_store_by_id(store_id)
    return store.name if store else store_id


def get_stores_by_chain(chain_id: str) -> List[Store]:
    return [store for store in STORES if store.chain_id == chain_id]


def get_stores_by_location(location_id: str) -> List[Store]:
    return [store for store in STORES if store.location_id == location_id]
