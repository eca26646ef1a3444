from shortlinker.dao.base.url_mapping_base_dao import UrlMappingBaseDAO


__all__ = ['UrlMappingBaseDAO']
